#!/usr/bin/env python3
"""
Test runner for the expiring URL shortener.
Runs the registry, statistics, code generation, log sink and HTTP API suites.
"""

import subprocess
import sys
import os

def run_tests():
    """Run the test suite"""
    print("🧪 Running Registry, Statistics, Log Sink and API Tests")
    print("=" * 40)
    
    # Tests import main.py from the project root
    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    
    try:
        result = subprocess.run([
            sys.executable, "-m", "pytest", 
            "tests/", 
            "-v", 
            "--tb=short"
        ], check=True)
        
        print("\n✅ All tests passed!")
        return result.returncode
        
    except subprocess.CalledProcessError as e:
        print(f"\n❌ Tests failed with exit code {e.returncode}")
        return e.returncode
    except FileNotFoundError:
        print("❌ pytest not found. Install with: pip install -e '.[test]'")
        return 1

if __name__ == "__main__":
    sys.exit(run_tests())

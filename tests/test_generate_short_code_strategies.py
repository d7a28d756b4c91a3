"""
Tests for short code generation strategies.
"""
import string

import pytest

from shorturl_app.exceptions import CapacityExhaustedError
from shorturl_app.services.short_code_strategies import (
    HexShortCodeStrategy,
    RandomShortCodeStrategy
)
from shorturl_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)


def never_taken(code):
    return False


class TestHexStrategy:
    """Test random-bytes-as-hex strategy"""
    
    def test_generates_six_hex_chars(self):
        """3 bytes render as 6 lowercase hex characters"""
        strategy = HexShortCodeStrategy(num_bytes=3)
        
        code = strategy.generate(never_taken)
        
        assert len(code) == 6
        assert set(code) <= set("0123456789abcdef")
    
    def test_length_follows_byte_count(self):
        strategy = HexShortCodeStrategy(num_bytes=4)
        
        assert len(strategy.generate(never_taken)) == 8
    
    def test_skips_taken_codes(self):
        """Taken candidates are drawn again until a free one appears"""
        strategy = HexShortCodeStrategy(num_bytes=3, max_attempts=50)
        seen = []
        
        def first_two_taken(code):
            seen.append(code)
            return len(seen) <= 2
        
        code = strategy.generate(first_two_taken)
        
        assert len(seen) == 3
        assert code == seen[-1]
    
    def test_gives_up_after_max_attempts(self):
        strategy = HexShortCodeStrategy(num_bytes=3, max_attempts=5)
        calls = []
        
        def always_taken(code):
            calls.append(code)
            return True
        
        with pytest.raises(CapacityExhaustedError):
            strategy.generate(always_taken)
        assert len(calls) == 5


class TestRandomStrategy:
    """Test alphanumeric random strategy"""
    
    def test_generates_correct_length(self):
        strategy = RandomShortCodeStrategy(length=7)
        
        code = strategy.generate(never_taken)
        
        assert len(code) == 7
        assert set(code) <= set(string.ascii_letters + string.digits)
    
    def test_codes_vary(self):
        strategy = RandomShortCodeStrategy(length=6)
        
        codes = {strategy.generate(never_taken) for _ in range(100)}
        
        assert len(codes) > 90

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            RandomShortCodeStrategy(max_attempts=0)


class TestShortCodeFactory:
    """Test strategy factory"""
    
    def setup_method(self):
        ShortCodeFactory.clear_instances()
    
    def test_creates_hex_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        assert isinstance(strategy, HexShortCodeStrategy)
        assert strategy.num_bytes == 3
    
    def test_creates_random_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        assert isinstance(strategy, RandomShortCodeStrategy)

    def test_creates_default_from_settings(self):
        """Hex is the configured default"""
        strategy = ShortCodeFactory.create_strategy()
        assert isinstance(strategy, HexShortCodeStrategy)

    def test_returns_cached_instance(self):
        first = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        second = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        assert first is second

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 3001
    cors_origins: List[str] = ["*"]
    
    # URL Shortener specific
    base_url: str = "http://localhost:3001"
    default_validity_minutes: int = 30
    
    # Short code generation strategy
    short_code_strategy: str = "hex"  # Options: "hex", "random"
    short_code_bytes: int = 3  # 3 bytes -> 6 hex characters
    short_code_length: int = 6  # Length for the alphanumeric strategy
    max_generation_attempts: int = 10
    
    # Process logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format_json: bool = False
    
    # Logging collaborator (request outcomes + lifecycle events)
    log_sink_backend: str = "console"  # Options: "console", "remote", "memory", "null"
    log_service_url: str = "http://localhost:9000/evaluation-service/logs"
    log_service_timeout: float = 2.0  # Seconds
    log_stack: Literal["backend", "frontend"] = "backend"
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()

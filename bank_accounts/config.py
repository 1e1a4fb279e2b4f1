"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class BankingConfig(BaseSettings):
    """Bank accounts demo configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Display configuration
    currency_symbol: str = "₹"
    amount_precision: int = 2  # Display only; balances are not rounded

    class Config:
        env_prefix = "BANK_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankingConfig()


def get_config() -> BankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankingConfig:
    """Reload configuration from environment"""
    global config
    config = BankingConfig()
    return config

"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Compliance rules
    approval_threshold: int = 97

    # Ledger placeholder
    ledger_tx_prefix: str = "weil-tx"
    ledger_placeholder_timestamp: int = 1705420800  # Stand-in until a real clock/ledger read exists

    # Service
    service_name: str = "bondfi-compliance"
    log_level: str = "INFO"


settings = Settings()

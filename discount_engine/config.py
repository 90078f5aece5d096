"""Application configuration using Pydantic settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DISCOUNTS_CONFIG_PATH = Path(__file__).parent / "discounts_config.json"


class Settings(BaseSettings):
    """Application settings."""

    # Discount configuration file (type tag -> class + parameters)
    discounts_config_path: Path = DEFAULT_DISCOUNTS_CONFIG_PATH

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Path | None = None  # logs/ is created here, defaults to cwd

    # Display
    currency_symbol: str = "Tk"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()

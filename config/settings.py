from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shared by every settings group so each one reads the flat env vars and .env file
ENV_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings."""

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    model_config = ENV_CONFIG


class ReceiptImportSettings(BaseSettings):
    """Settings for decoding receipt export files."""

    path: str = Field(
        default="data/",
        validation_alias="RECEIPTS_PATH",
        description="Path to the RLP encoded receipts export",
    )
    # Maximum number of simultaneously open lists while reading RLP
    rlp_max_depth: int = Field(default=1024, gt=0, validation_alias="RLP_MAX_DEPTH")
    # Maximum number of container lists entered below the root while flattening
    max_nesting_depth: int = Field(default=256, gt=0, validation_alias="RECEIPT_MAX_NESTING_DEPTH")
    require_receipts: bool = Field(default=False, validation_alias="REQUIRE_RECEIPTS")

    model_config = ENV_CONFIG


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each group maps flat env vars through validation_alias.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    receipts: ReceiptImportSettings = Field(default_factory=ReceiptImportSettings)

    model_config = ENV_CONFIG


# Singleton instance
settings = Settings()

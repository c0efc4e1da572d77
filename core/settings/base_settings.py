from pydantic_settings import BaseSettings, SettingsConfigDict


class FarmerConnectBaseSettings(BaseSettings):
    """Shared loading rules: `.env` in the working directory, unknown keys ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

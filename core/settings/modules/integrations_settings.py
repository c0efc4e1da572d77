from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import FarmerConnectBaseSettings


class SlackSettings(FarmerConnectBaseSettings):
    """
    Slack integration settings.
    Loaded from .env file with exact variable name matching.
    """

    enabled: bool = Field(default=False, alias="FARMER_CONNECT_SLACK_ENABLED")
    webhook_url: str = Field(default="", alias="SLACK_WEBHOOK_URL")
    channel_id: str = Field(default="", alias="SLACK_CHANNEL_ID")
    prefix: str = Field(default="[FARMER CONNECT]", alias="FARMER_CONNECT_SLACK_PREFIX")

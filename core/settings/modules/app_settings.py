from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.infrastructure.database.config import DatabaseSettings
from core.settings.modules.integrations_settings import SlackSettings
from core.settings.modules.marketplace_settings import MarketplaceSettings
from core.settings.modules.supabase_settings import SupabaseSettings


class IntegrationsSettings(BaseModel):
    """Aggregates integrations settings as nested objects."""

    model_config = ConfigDict(extra="ignore")

    slack: SlackSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    supabase: SupabaseSettings
    marketplace: MarketplaceSettings
    integrations: IntegrationsSettings

    @property
    def slack(self) -> SlackSettings:
        return self.integrations.slack


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        supabase=SupabaseSettings(),
        marketplace=MarketplaceSettings(),
        integrations=IntegrationsSettings(slack=SlackSettings()),
    )

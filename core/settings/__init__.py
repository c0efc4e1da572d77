# Settings package
from core.settings.modules import (
    AppSettings,
    IntegrationsSettings,
    MarketplaceSettings,
    SlackSettings,
    SupabaseSettings,
    get_app_settings,
)

__all__ = [
    "get_app_settings",
    "AppSettings",
    "IntegrationsSettings",
    "MarketplaceSettings",
    "SlackSettings",
    "SupabaseSettings",
]

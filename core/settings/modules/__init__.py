# Settings modules
from .app_settings import AppSettings, get_app_settings, IntegrationsSettings
from .integrations_settings import SlackSettings
from .marketplace_settings import MarketplaceSettings
from .supabase_settings import SupabaseSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "IntegrationsSettings",
    "MarketplaceSettings",
    "SlackSettings",
    "SupabaseSettings",
]

# Settings package
from order_core.settings.app import Settings, get_settings
from order_core.settings.sections import ApplicationSettings, DatabaseSettings

__all__ = ["ApplicationSettings", "DatabaseSettings", "Settings", "get_settings"]

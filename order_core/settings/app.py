# order_core/settings/app.py
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from order_core.settings.sections import ApplicationSettings, DatabaseSettings


class Settings(BaseModel):
    """
    Settings aggregator.
    Sections are instantiated inside ``get_settings`` so nothing is read
    from the environment at import time.
    """

    model_config = ConfigDict(frozen=True)

    app: ApplicationSettings
    database: DatabaseSettings


@lru_cache()
def get_settings() -> Settings:
    """Return cached global settings for the entire app."""
    return Settings(app=ApplicationSettings(), database=DatabaseSettings())

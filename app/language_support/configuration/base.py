"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettingsBase(BaseSettings):
    """Base class for language catalog settings.

    All settings sections should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

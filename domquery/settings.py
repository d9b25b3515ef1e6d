"""
domquery configuration using pydantic-settings.

All settings can be set via environment variables with DOMQUERY_ prefix
or via a .env file in the working directory.
"""

from importlib.metadata import version
from typing import Literal

from anystore.settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict

# Get version from package metadata
try:
    VERSION = version("domquery")
except Exception:
    VERSION = "0.0.0"


class Settings(BaseSettings):
    """
    domquery configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with DOMQUERY_ prefix
    2. .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="domquery_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # Documents
    document_type: Literal["html", "xml"] = Field(default="html")
    remove_blank_text: bool = Field(
        default=False, description="Drop whitespace-only text nodes on load"
    )
    huge_tree: bool = Field(
        default=False, description="Lift lxml's security limits for very deep trees"
    )

    # Selector compilation
    cache_selectors: bool = Field(default=True)
    """Memoize compiled CSS selector branches for the process lifetime"""

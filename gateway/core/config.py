"""
Configuration management for the Video Gateway.
Centralizes environment variable handling and application settings.
"""
import os
from typing import Dict, List
from urllib.parse import urlparse
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables
load_dotenv()

class ProviderConfig:
    """Connection details for one upstream provider."""

    def __init__(self, name: str, key: str, url: str):
        self.name = name
        self.key = key
        self.url = url

    @property
    def host(self) -> str:
        """Network location of the provider URL, sent as the RapidAPI host header."""
        return urlparse(self.url).netloc

class Settings:
    """Application settings loaded from environment variables."""

    REQUIRED_VARIABLES = [
        "API1_NAME", "API1_KEY", "API1_URL",
        "API3_NAME", "API3_KEY", "API3_URL",
        "URL_SHORTENER_URL", "URL_SHORTENER_API_KEY",
    ]

    def __init__(self):
        # API Configuration
        self.api_title = "Video Gateway"
        self.api_description = "Resolves playable video endpoints and search results through third-party providers"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"

        # Server
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8080"))

        # Video endpoint provider
        self.api1_name = os.getenv("API1_NAME", "")
        self.api1_key = os.getenv("API1_KEY", "")
        self.api1_url = os.getenv("API1_URL", "")

        # Search provider
        self.api3_name = os.getenv("API3_NAME", "")
        self.api3_key = os.getenv("API3_KEY", "")
        self.api3_url = os.getenv("API3_URL", "")

        # URL shortener
        self.url_shortener_url = os.getenv("URL_SHORTENER_URL", "")
        self.url_shortener_api_key = os.getenv("URL_SHORTENER_API_KEY", "")

        # Upstream calls
        self.upstream_timeout_seconds = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "5"))

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def missing_variables(self) -> List[str]:
        """Names of required environment variables that are unset or empty."""
        return [name for name in self.REQUIRED_VARIABLES if not getattr(self, name.lower())]

    def validate(self) -> None:
        """Fail fast when the process was started without its required configuration."""
        missing = self.missing_variables()
        if missing:
            raise ConfigurationError(", ".join(missing), "environment variable not set")

        if not urlparse(self.url_shortener_url).hostname:
            raise ConfigurationError("URL_SHORTENER_URL", f"no hostname in {self.url_shortener_url!r}")

    @property
    def video_providers(self) -> List[ProviderConfig]:
        """Video endpoint providers in fallback order."""
        return [ProviderConfig(self.api1_name, self.api1_key, self.api1_url)]

    @property
    def search_providers(self) -> List[ProviderConfig]:
        """Search providers in fallback order."""
        return [ProviderConfig(self.api3_name, self.api3_key, self.api3_url)]

    def provider_names(self) -> Dict[str, List[str]]:
        """Configured provider names per category."""
        return {
            "video": [p.name for p in self.video_providers if p.name],
            "search": [p.name for p in self.search_providers if p.name],
        }

# Create global settings instance
settings = Settings()

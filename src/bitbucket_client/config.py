"""Configuration management for the Bitbucket client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

BITBUCKET_V2_URL = "https://bitbucket.org/api/2.0/"
BITBUCKET_V1_URL = "https://bitbucket.org/api/1.0/"


@dataclass
class Config:
    """Client configuration."""

    token: str | None = None
    api_v2_url: str = BITBUCKET_V2_URL
    api_v1_url: str = BITBUCKET_V1_URL

    # Timeouts
    request_timeout: float = 30.0

    # Transport retries (1 = a single attempt, no retries)
    max_attempts: int = 1

    # Pagination
    default_page_len: int = 50  # Bitbucket's own default is 10

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        return cls(
            token=os.getenv("BITBUCKET_TOKEN") or None,
            api_v2_url=os.getenv("BITBUCKET_API_URL", BITBUCKET_V2_URL),
            api_v1_url=os.getenv("BITBUCKET_API_V1_URL", BITBUCKET_V1_URL),
            request_timeout=float(os.getenv("BITBUCKET_TIMEOUT", "30")),
            max_attempts=max(1, int(os.getenv("BITBUCKET_MAX_ATTEMPTS", "1"))),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if an access token is configured."""
        return bool(self.token)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config

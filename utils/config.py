"""
Configuration management for the contact extractor.
"""

import os

from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Config(BaseModel):
    """Configuration settings for fetching pages and extracting contacts."""

    # Fetch settings
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    request_timeout: float = Field(default=30.0, ge=1.0, le=120.0)
    follow_redirects: bool = Field(default=True)

    # Batch settings
    concurrent_requests: int = Field(default=3, ge=1, le=10)

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Create config from CONTACT_EXTRACTOR_* environment variables.

        Keyword arguments that are not None take precedence over the environment.
        """
        values = {
            'user_agent': os.getenv("CONTACT_EXTRACTOR_USER_AGENT", DEFAULT_USER_AGENT),
            'request_timeout': float(os.getenv("CONTACT_EXTRACTOR_REQUEST_TIMEOUT", "30.0")),
            'follow_redirects': os.getenv("CONTACT_EXTRACTOR_FOLLOW_REDIRECTS", "true").lower() == "true",
            'concurrent_requests': int(os.getenv("CONTACT_EXTRACTOR_CONCURRENT_REQUESTS", "3")),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

"""Run configuration for profile generation."""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_OUTPUT_FILE = "README.md"


@dataclass(frozen=True)
class ProfileSettings:
    """Explicit configuration handed to the client, enricher and service."""

    username: str
    token: Optional[str] = None
    exclude_file: Optional[str] = None
    priority_file: Optional[str] = None
    contact_file: Optional[str] = None
    ai_credit_file: Optional[str] = None
    output_file: str = DEFAULT_OUTPUT_FILE
    title: str = "My Repositories"
    check_releases: bool = True
    release_check_delay: float = 0.1  # seconds between release lookups
    request_timeout: float = 30
    max_retries: int = 3

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise ValueError("GitHub username is required")
        if self.release_check_delay < 0:
            raise ValueError("release_check_delay must not be negative")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")

    @classmethod
    def from_args(cls, username: str, token: Optional[str] = None, **kwargs) -> "ProfileSettings":
        """
        Build settings, resolving the token from GITHUB_TOKEN when not given.

        Args:
            username: GitHub username whose repositories are listed
            token: Personal access token. If None, uses GITHUB_TOKEN env var.
            **kwargs: Remaining ProfileSettings fields
        """
        if not token:
            token = os.getenv("GITHUB_TOKEN") or None
        return cls(username=username, token=token, **kwargs)

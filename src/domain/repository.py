"""Domain entities for GitHub repositories."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def normalize_name(name: str) -> str:
    """Normalize a repository name for case-insensitive comparison."""
    return name.strip().casefold()


@dataclass
class Repository:
    """Repository entity listed on the profile.

    Everything except ``has_releases`` comes straight from the listing API;
    ``has_releases`` is filled in by the release enrichment step.
    """

    name: str
    html_url: str
    created_at: datetime
    updated_at: datetime
    pushed_at: Optional[datetime]
    description: Optional[str] = None
    language: Optional[str] = None
    homepage: Optional[str] = None
    fork: bool = False
    source_url: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    has_releases: bool = False

    @property
    def normalized_name(self) -> str:
        return normalize_name(self.name)

    @property
    def releases_url(self) -> str:
        return f"{self.html_url.rstrip('/')}/releases"


@dataclass(frozen=True)
class AICredit:
    """Image annotation crediting AI assistance on a repository."""

    name: str
    image_path: str
    alt_text: str
    title_text: str
    width: int
    height: int

    @property
    def normalized_name(self) -> str:
        return normalize_name(self.name)

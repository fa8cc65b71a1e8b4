"""Exclusion filtering of listed repositories."""

import logging
from typing import List, Sequence

from src.domain.name_rules import ExclusionSet
from src.domain.repository import Repository

logger = logging.getLogger(__name__)


def filter_repositories(repositories: Sequence[Repository], exclusions: ExclusionSet) -> List[Repository]:
    """Drop repositories named in ``exclusions``, keeping the order of the rest."""
    kept = [repo for repo in repositories if repo.name not in exclusions]

    removed = len(repositories) - len(kept)
    if removed:
        logger.info(f"Excluded {removed} repositories; {len(kept)} remain")
    return kept

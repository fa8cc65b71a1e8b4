"""Release enrichment of repositories."""

import logging
import time
from typing import Callable, List, Sequence

import requests

from src.domain.repository import Repository
from src.domain.settings import ProfileSettings
from src.infrastructure.github_client import GitHubRestClient, SourceUnavailable

logger = logging.getLogger(__name__)


class ReleaseEnricher:
    """Marks which repositories have a published release."""

    def __init__(
        self,
        github_client: GitHubRestClient,
        settings: ProfileSettings,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize release enricher.

        Args:
            github_client: GitHub API client used for release probes
            settings: Run settings providing owner and delay between probes
            sleep: Pause function, replaceable in tests
        """
        self.github_client = github_client
        self.username = settings.username
        self.delay = settings.release_check_delay
        self.sleep = sleep

    def enrich(self, repositories: Sequence[Repository]) -> List[str]:
        """
        Set ``has_releases`` on each repository in place.

        A failed lookup leaves that repository's flag False and is reported,
        and the remaining repositories are still checked.

        Returns:
            One warning message per failed lookup
        """
        warnings: List[str] = []

        for position, repo in enumerate(repositories):
            if position and self.delay:
                # Self-throttle between probes to stay under the API rate limit
                self.sleep(self.delay)

            try:
                repo.has_releases = self.github_client.has_published_release(self.username, repo.name)
            except (SourceUnavailable, requests.exceptions.RequestException) as e:
                repo.has_releases = False
                message = f"Could not check releases for {repo.name}: {e}"
                logger.warning(message)
                warnings.append(message)

        with_releases = sum(1 for repo in repositories if repo.has_releases)
        logger.info(
            f"Checked releases for {len(repositories)} repositories: "
            f"{with_releases} with releases, {len(warnings)} failed"
        )
        return warnings

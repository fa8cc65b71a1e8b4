"""GitHub REST API client with pagination, retry logic and release probes."""

import time
import logging
from datetime import datetime
from typing import List, Optional, Dict, Any
import requests

from src.domain.repository import Repository
from src.domain.settings import ProfileSettings

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """Raised when GitHub returns an unexpected status or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RateLimitExceeded(SourceUnavailable):
    """Raised when GitHub API rate limit is exceeded."""
    pass


class GitHubRestClient:
    """Client for the GitHub REST API listing a user's repositories."""

    # Unauthenticated requests get 60 calls per hour; a token raises that to 5,000.
    # Every listing page and every release probe costs one call.

    API_ROOT = "https://api.github.com"
    PAGE_SIZE = 100
    USER_AGENT = "github-profilegen-py"
    RETRY_DELAY_SECONDS = 1

    def __init__(self, settings: ProfileSettings, session: Optional[requests.Session] = None):
        """
        Initialize GitHub REST client.

        Args:
            settings: Run settings providing token, timeout and retry count
            session: HTTP session to use. If None, a new one is created.
        """
        self.timeout = settings.request_timeout
        self.max_retries = settings.max_retries
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.USER_AGENT,
        }

        # Add authorization header if token is available
        if settings.token:
            self.headers["Authorization"] = f"Bearer {settings.token}"

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()
            logger.debug("GitHub HTTP session closed")

    def __enter__(self) -> "GitHubRestClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _get_with_retries(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Issue a GET request, retrying transport failures with exponential backoff.

        Raises:
            SourceUnavailable: If every attempt fails at the transport level
        """
        for attempt in range(self.max_retries):
            try:
                return self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                if attempt < self.max_retries - 1:
                    delay = self.RETRY_DELAY_SECONDS * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"Request failed (attempt {attempt + 1}/{self.max_retries}): {e}. Retrying in {delay}s...")
                    time.sleep(delay)
                else:
                    raise SourceUnavailable(f"GitHub API unreachable: {e}") from e

        raise SourceUnavailable("Max retries exceeded")

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        """Translate a non-200 listing response into SourceUnavailable."""
        if response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
            reset_time = int(response.headers.get("X-RateLimit-Reset", 0))
            wait_time = max(reset_time - int(time.time()), 0)
            raise RateLimitExceeded(
                f"Rate limit exceeded. Resets in {wait_time} seconds; "
                f"pass a token to raise the limit",
                status_code=response.status_code,
                body=response.text,
            )
        raise SourceUnavailable(
            f"GitHub API returned status {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    def fetch_all_repositories(self, username: str) -> List[Repository]:
        """
        Fetch every public repository of a user, page by page.

        Stops after a page holding fewer than PAGE_SIZE repositories.

        Args:
            username: GitHub login

        Returns:
            Repositories in the order the API lists them

        Raises:
            SourceUnavailable: If any page request fails
        """
        url = f"{self.API_ROOT}/users/{username}/repos"
        repositories: List[Repository] = []
        page = 1

        while True:
            response = self._get_with_retries(url, params={"page": page, "per_page": self.PAGE_SIZE})
            if response.status_code != 200:
                self._raise_for_status(response)

            try:
                nodes = response.json()
            except ValueError as e:
                raise SourceUnavailable(
                    f"GitHub API returned invalid JSON on page {page}",
                    status_code=response.status_code,
                    body=response.text,
                ) from e

            if not isinstance(nodes, list):
                raise SourceUnavailable(
                    f"GitHub API returned {type(nodes).__name__} instead of a repository list on page {page}",
                    status_code=response.status_code,
                    body=response.text,
                )

            try:
                repositories.extend(self._parse_repository(node) for node in nodes)
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise SourceUnavailable(
                    f"GitHub API returned a malformed repository on page {page}: {e!r}",
                    status_code=response.status_code,
                    body=response.text,
                ) from e

            remaining = response.headers.get("X-RateLimit-Remaining")
            logger.debug(f"Fetched page {page} with {len(nodes)} repositories. API calls remaining: {remaining}")

            if len(nodes) < self.PAGE_SIZE:
                break
            page += 1

        return repositories

    def has_published_release(self, username: str, repo_name: str) -> bool:
        """
        Check whether a repository has a published release.

        Probes the latest-release endpoint with HEAD. If the probe fails at the
        transport level (GitHub can answer HEAD with a redirect loop), it is
        retried once with GET.

        Args:
            username: Repository owner
            repo_name: Repository name

        Returns:
            True on 200, False on 404

        Raises:
            SourceUnavailable: On any other status, or if both attempts fail
        """
        url = f"{self.API_ROOT}/repos/{username}/{repo_name}/releases/latest"

        try:
            response = self.session.head(url, headers=self.headers, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            logger.debug(f"HEAD probe for {repo_name} failed ({e}); retrying with GET")
            try:
                response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            except requests.exceptions.RequestException as retry_error:
                raise SourceUnavailable(
                    f"Release check for {repo_name} failed: {retry_error}"
                ) from retry_error

        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise SourceUnavailable(
            f"Release check for {repo_name} returned status {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )

    @staticmethod
    def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        return datetime.fromisoformat(value.replace("Z", "+00:00"))

    def _parse_repository(self, node: Dict[str, Any]) -> Repository:
        """Build a Repository entity from one listing item."""
        # The listing omits "source"; it is only present on single-repo payloads
        upstream = node.get("source") or node.get("parent") or {}

        return Repository(
            name=node["name"],
            html_url=node["html_url"],
            description=node.get("description") or None,
            language=node.get("language") or None,
            homepage=node.get("homepage") or None,
            created_at=self._parse_timestamp(node["created_at"]),
            updated_at=self._parse_timestamp(node["updated_at"]),
            pushed_at=self._parse_timestamp(node.get("pushed_at")),
            fork=bool(node.get("fork", False)),
            source_url=upstream.get("html_url") or None,
            stargazers_count=node.get("stargazers_count", 0),
            forks_count=node.get("forks_count", 0),
        )

"""Application service generating a GitHub profile README."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from src.application.release_enricher import ReleaseEnricher
from src.application.repository_filter import filter_repositories
from src.application.repository_ordering import order_repositories
from src.domain.name_rules import ExclusionSet, PriorityOrder
from src.domain.repository import AICredit, Repository
from src.domain.settings import ProfileSettings
from src.infrastructure.github_client import GitHubRestClient
from src.infrastructure.input_files import load_ai_credits, load_text_lines
from src.infrastructure.readme_renderer import ReadmeRenderer, RenderFailure

logger = logging.getLogger(__name__)


@dataclass
class ProfileInputs:
    """Static inputs read from local files before any network traffic."""

    exclusions: ExclusionSet = field(default_factory=ExclusionSet)
    priority: PriorityOrder = field(default_factory=PriorityOrder)
    contact_lines: List[str] = field(default_factory=list)
    ai_credits: List[AICredit] = field(default_factory=list)


@dataclass
class ProfileResult:
    """Repositories in display order plus the non-fatal problems met on the way."""

    repositories: List[Repository]
    warnings: List[str] = field(default_factory=list)


class ProfileService:
    """Service sequencing fetch, exclusion, release enrichment, ordering and rendering."""

    def __init__(
        self,
        github_client: GitHubRestClient,
        settings: ProfileSettings,
        release_enricher: Optional[ReleaseEnricher] = None,
        renderer: Optional[ReadmeRenderer] = None,
    ):
        """
        Initialize profile service.

        Args:
            github_client: GitHub API client
            settings: Run settings
            release_enricher: Enrichment stage. If None, one is built from the client.
            renderer: README renderer. If None, one is built with the configured title.
        """
        self.github_client = github_client
        self.settings = settings
        self.release_enricher = release_enricher or ReleaseEnricher(github_client, settings)
        self.renderer = renderer or ReadmeRenderer(title=settings.title)

    def load_inputs(self) -> ProfileInputs:
        """
        Read the exclusion, priority, contact and AI-credit files.

        Raises:
            InputReadFailure: If any configured file cannot be read
        """
        inputs = ProfileInputs(
            exclusions=ExclusionSet(load_text_lines(self.settings.exclude_file)),
            priority=PriorityOrder(load_text_lines(self.settings.priority_file)),
            contact_lines=load_text_lines(self.settings.contact_file),
            ai_credits=load_ai_credits(self.settings.ai_credit_file),
        )
        logger.info(
            f"Loaded {len(inputs.exclusions)} exclusions, {len(inputs.priority)} priority entries, "
            f"{len(inputs.contact_lines)} contact lines, {len(inputs.ai_credits)} AI credits"
        )
        return inputs

    def build_profile(self, inputs: ProfileInputs) -> ProfileResult:
        """
        Fetch, filter, enrich and order the user's repositories.

        Raises:
            SourceUnavailable: If the repository listing cannot be fetched
        """
        username = self.settings.username
        logger.info(f"Fetching repositories for user {username}")
        repositories = self.github_client.fetch_all_repositories(username)
        logger.info(f"Found {len(repositories)} repositories")

        repositories = filter_repositories(repositories, inputs.exclusions)

        warnings: List[str] = []
        if self.settings.check_releases:
            warnings = self.release_enricher.enrich(repositories)
        else:
            logger.info("Release checks disabled")

        ordered = order_repositories(repositories, inputs.priority)
        return ProfileResult(repositories=ordered, warnings=warnings)

    def generate(self) -> ProfileResult:
        """
        Run the whole pipeline and write the README.

        Returns:
            The ordered repositories and collected warnings

        Raises:
            InputReadFailure: If an input file cannot be read
            SourceUnavailable: If the repository listing cannot be fetched
            RenderFailure: If the README cannot be rendered or written
        """
        inputs = self.load_inputs()
        result = self.build_profile(inputs)

        logger.info(f"Generating README to {self.settings.output_file}")
        try:
            content = self.renderer.render(result.repositories, inputs.contact_lines, inputs.ai_credits)
        except RenderFailure:
            raise
        except Exception as e:
            raise RenderFailure(f"Rendering failed: {e}") from e
        self.renderer.write(content, self.settings.output_file)

        if result.warnings:
            logger.warning(f"Completed with {len(result.warnings)} warnings")
        return result

#!/usr/bin/env python3
"""Script to generate a GitHub profile README from a user's repositories."""

import argparse
import logging
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.domain.settings import DEFAULT_OUTPUT_FILE, ProfileSettings
from src.infrastructure.github_client import GitHubRestClient, SourceUnavailable
from src.infrastructure.input_files import InputReadFailure
from src.infrastructure.readme_renderer import RenderFailure
from src.application.profile_service import ProfileService

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a profile README listing a GitHub user's repositories."
    )
    parser.add_argument("--user", required=True, help="GitHub username")
    parser.add_argument("--token", help="GitHub token (default: GITHUB_TOKEN env var)")
    parser.add_argument("--exclude", help="Path to exclusion list file")
    parser.add_argument("--priority", help="Path to priority list file")
    parser.add_argument("--contact", help="Path to contact info file")
    parser.add_argument("--ai-credits", help="Path to AI credit file (name|image|alt|title|width|height)")
    parser.add_argument("--output", default=DEFAULT_OUTPUT_FILE, help="Path to output file")
    parser.add_argument("--title", default="My Repositories", help="README heading")
    parser.add_argument("--no-releases", action="store_true", help="Skip checking repositories for releases")
    parser.add_argument("--release-delay", type=float, default=0.1, help="Seconds to wait between release checks")
    parser.add_argument("--timeout", type=float, default=30, help="Per-request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Generate the README and return the process exit status."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = ProfileSettings.from_args(
            username=args.user,
            token=args.token,
            exclude_file=args.exclude,
            priority_file=args.priority,
            contact_file=args.contact,
            ai_credit_file=args.ai_credits,
            output_file=args.output,
            title=args.title,
            check_releases=not args.no_releases,
            release_check_delay=args.release_delay,
            request_timeout=args.timeout,
        )
        if not settings.token:
            logger.warning("GITHUB_TOKEN not found. Using unauthenticated requests (limited rate).")

        with GitHubRestClient(settings) as github_client:
            service = ProfileService(github_client, settings)
            result = service.generate()

        logger.info(f"Done. Listed {len(result.repositories)} repositories in {settings.output_file}")
        return 0

    except InputReadFailure as e:
        logger.error(f"Error loading input file: {e}")
        return 1
    except SourceUnavailable as e:
        logger.error(f"Error fetching repositories: {e}")
        return 1
    except RenderFailure as e:
        logger.error(f"Error generating README: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except Exception as e:
        logger.error(f"Profile generation failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

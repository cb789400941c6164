#!/usr/bin/env python3
"""Script to browse GitHub users and repositories interactively."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from user_finder.config import Settings
from user_finder.domain.mapper import get_mapper
from user_finder.infrastructure.github_client import GitHubRestClient
from user_finder.application.user_service import UserService
from user_finder.application.session import Session

logger = logging.getLogger(__name__)


def main():
    """Run the interactive user finder session."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info(f"Using {settings.api_url} with the '{settings.parser}' parser")

    github_client = GitHubRestClient(base_url=settings.api_url, timeout=settings.timeout)
    user_service = UserService(github_client, mapper=get_mapper(settings.parser))
    session = Session(user_service)

    try:
        session.run()
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

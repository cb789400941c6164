"""Interactive menu loop over the user cache."""

import logging
from typing import Callable, Optional

from user_finder.application.formatting import (
    format_cached_users,
    format_repository_match,
    format_user,
)
from user_finder.application.user_cache import UserCache
from user_finder.application.user_service import UserService

logger = logging.getLogger(__name__)

MENU = "\n".join([
    "",
    "GitHub User Fetcher",
    "1. Get user info by username",
    "2. Show cached users",
    "3. Search cached users",
    "4. Search repositories",
    "5. Exit",
])


class Session:
    """Menu-driven console session owning one cache."""

    EXIT_CHOICE = "5"

    def __init__(
        self,
        user_service: UserService,
        cache: Optional[UserCache] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize console session.

        Args:
            user_service: Service used to fetch users
            cache: Cache to browse; a fresh one is created if None
            input_func: Prompting reader, ``input`` by default
            output: Line writer, ``print`` by default
        """
        self.user_service = user_service
        self.cache = cache if cache is not None else UserCache()
        self.input_func = input_func
        self.output = output
        self.handlers = {
            "1": self.fetch_user,
            "2": self.show_cached_users,
            "3": self.search_users,
            "4": self.search_repositories,
        }

    def run(self):
        """Show the menu until the operator exits or input ends."""
        while True:
            self.output(MENU)
            try:
                choice = self.input_func("Choose option: ")
            except EOFError:
                logger.info("Input closed, leaving session")
                return

            if choice == self.EXIT_CHOICE:
                return

            handler = self.handlers.get(choice)
            if handler is None:
                self.output("Invalid option!")
                continue

            try:
                handler()
            except EOFError:
                logger.info("Input closed, leaving session")
                return

    def fetch_user(self):
        username = self.input_func("Enter GitHub username: ").strip()
        if not username:
            self.output(UserService.EMPTY_USERNAME_MESSAGE)
            return

        self.output("Fetching data...")
        result = self.user_service.lookup(username, self.cache)
        if result.ok:
            self.output(format_user(result.user))
        else:
            self.output(f"Error: {result.error}")

    def show_cached_users(self):
        self.output(format_cached_users(self.cache.users()))

    def search_users(self):
        query = self.input_func("Enter username to search: ")
        results = self.cache.search_users(query)
        if not results:
            self.output("No users found")
            return
        for user in results:
            self.output(format_user(user))

    def search_repositories(self):
        query = self.input_func("Enter repository name to search: ")
        matches = self.cache.search_repositories(query)
        if not matches:
            self.output("No repositories found")
            return
        for match in matches:
            self.output(format_repository_match(match))

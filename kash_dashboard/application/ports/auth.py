"""Port for authentication and profile calls."""

from typing import Protocol

from kash_dashboard.domain.models import UserProfile


class AuthPort(Protocol):
    """Port exposing login, registration and profile retrieval."""

    def login(self, email: str, password: str) -> str:
        """Authenticate and return a bearer token."""

    def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a bearer token."""

    def fetch_profile(self, token: str) -> UserProfile:
        """Return the profile bound to the token."""


__all__ = ["AuthPort"]

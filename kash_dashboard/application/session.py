"""Explicit session object holding the authenticated user's token."""

from kash_dashboard.domain.models import UserProfile


class NotAuthenticatedError(RuntimeError):
    """Raised when a token is requested from a session that is not open."""


class UserSession:
    """Bearer token and profile of the signed-in user.

    The session is created once by the composition root and passed to the
    components that call the API. Its lifecycle is bound to login/logout.
    """

    def __init__(self) -> None:
        self._token: str | None = None
        self._profile: UserProfile | None = None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def profile(self) -> UserProfile | None:
        return self._profile

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def start(self, token: str, profile: UserProfile | None = None) -> None:
        """Open the session with a fresh token."""
        if not token:
            raise ValueError("A session cannot start without a token.")
        self._token = token
        self._profile = profile

    def set_profile(self, profile: UserProfile) -> None:
        self._profile = profile

    def end(self) -> None:
        """Forget the token and profile."""
        self._token = None
        self._profile = None

    def require_token(self) -> str:
        """Return the token or raise when nobody is signed in.

        Raises:
            NotAuthenticatedError: If the session is not open.
        """
        if self._token is None:
            raise NotAuthenticatedError("No user is signed in.")
        return self._token


__all__ = ["UserSession", "NotAuthenticatedError"]

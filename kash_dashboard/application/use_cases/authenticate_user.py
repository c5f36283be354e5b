"""Use case handling login, registration and logout."""

from kash_dashboard.application.ports.auth import AuthPort
from kash_dashboard.application.session import UserSession
from kash_dashboard.domain.models import UserProfile
from kash_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class AuthenticateUserUseCase:
    """Open and close the user session against the API."""

    def __init__(
        self,
        auth_repository: AuthPort,
        session: UserSession,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            auth_repository: Port providing login and profile calls.
            session: Session updated on login and logout.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._auth_repository = auth_repository
        self._session = session
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def login(self, email: str, password: str) -> UserProfile:
        """Authenticate, open the session and load the profile.

        Args:
            email: User e-mail.
            password: User password.

        Returns:
            UserProfile: Profile of the signed-in user.
        """
        token = self._auth_repository.login(email, password)
        profile = self._open_session(token)
        self._usage_logger.info(f"User {profile.email} logged in")
        return profile

    def register(self, name: str, email: str, password: str) -> UserProfile:
        """Create an account, then open the session like ``login``."""
        token = self._auth_repository.register(name, email, password)
        profile = self._open_session(token)
        self._usage_logger.info(f"User {profile.email} registered")
        return profile

    def reload_profile(self) -> UserProfile:
        """Fetch the profile again, e.g. after it was edited."""
        return self._open_session(self._session.require_token())

    def logout(self) -> None:
        profile = self._session.profile
        self._session.end()
        if profile is not None:
            self._usage_logger.info(f"User {profile.email} logged out")

    def _open_session(self, token: str) -> UserProfile:
        self._session.start(token)
        try:
            profile = self._auth_repository.fetch_profile(token)
        except Exception as exc:
            self._logger.error(f"Failed to load user profile: {exc}")
            self._session.end()
            raise
        self._session.set_profile(profile)
        return profile


__all__ = ["AuthenticateUserUseCase"]

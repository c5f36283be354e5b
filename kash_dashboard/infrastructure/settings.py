"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from kash_dashboard.domain.constants import (
    DEFAULT_MONTH_LOCALE,
    SHORT_MONTH_NAMES,
)
from kash_dashboard.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "https://localhost:7156"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class KashApiSettings:
    """Settings for reaching the Kash API.

    Attributes:
        base_url: API root URL without a trailing slash.
        timeout_seconds: Timeout applied to every HTTP request.
        month_locale: Locale of the short month names used for bucketing.
    """

    base_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    month_locale: str = DEFAULT_MONTH_LOCALE

    @property
    def month_names(self) -> tuple[str, ...]:
        """Return the short month names of the configured locale."""
        return SHORT_MONTH_NAMES[self.month_locale]

    @classmethod
    def from_env(cls) -> "KashApiSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            KashApiSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        base_url = (
            os.getenv("KASH_API_URL", DEFAULT_API_URL).strip().rstrip("/")
            or DEFAULT_API_URL
        )
        timeout = cls._parse_timeout(os.getenv("KASH_API_TIMEOUT"), logger)
        month_locale = cls._parse_month_locale(
            os.getenv("KASH_MONTH_LOCALE"),
            logger,
        )
        return cls(
            base_url=base_url,
            timeout_seconds=timeout,
            month_locale=month_locale,
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the request timeout, falling back to the default.

        Args:
            raw_value: Raw timeout in seconds.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_value)
        except ValueError:
            timeout = 0.0
        if timeout <= 0:
            logger.warning(
                f"Invalid KASH_API_TIMEOUT '{raw_value}'. "
                f"Using {DEFAULT_TIMEOUT_SECONDS} seconds."
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout

    @staticmethod
    def _parse_month_locale(raw_value: str | None, logger) -> str:
        if not raw_value:
            return DEFAULT_MONTH_LOCALE
        locale = raw_value.strip()
        if locale not in SHORT_MONTH_NAMES:
            logger.warning(
                f"Unsupported KASH_MONTH_LOCALE '{raw_value}'. "
                f"Using {DEFAULT_MONTH_LOCALE}."
            )
            return DEFAULT_MONTH_LOCALE
        return locale


__all__ = ["KashApiSettings"]

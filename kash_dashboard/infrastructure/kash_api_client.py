"""HTTP adapter for the Kash REST API."""

from collections.abc import Mapping
from typing import Any

import requests

from kash_dashboard.domain.models import Investment, Transaction, UserProfile
from kash_dashboard.infrastructure.errors import KashApiError
from kash_dashboard.infrastructure.logging.logger import get_app_logger
from kash_dashboard.infrastructure.record_mapping import (
    investments_from_payload,
    profile_from_payload,
    transactions_from_payload,
)
from kash_dashboard.infrastructure.settings import KashApiSettings


class KashApiClient:
    """AuthPort and FinanceRecordsPort implementation backed by requests.

    Every response is the envelope ``{"data", "success", "message"}``; the
    client unwraps ``data`` and raises ``KashApiError`` for HTTP failures
    and unsuccessful envelopes.
    """

    def __init__(
        self,
        settings: KashApiSettings,
        http_session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: API location and timeout.
            http_session: Optional requests session, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._http = http_session or requests.Session()
        self._logger = logger or get_app_logger()

    # Auth

    def login(self, email: str, password: str) -> str:
        data = self._request(
            "POST",
            "/api/auth/login",
            json={"email": email, "senha": password},
        )
        return self._extract_token(data, "E-mail ou senha inválidos.")

    def register(self, name: str, email: str, password: str) -> str:
        data = self._request(
            "POST",
            "/api/auth/registro",
            json={"nome": name, "email": email, "senha": password},
        )
        return self._extract_token(
            data,
            "Não foi possível concluir o registro.",
        )

    def fetch_profile(self, token: str) -> UserProfile:
        data = self._request("GET", "/api/usuarios/perfil", token=token)
        if not isinstance(data, Mapping):
            raise KashApiError("Profile payload is missing.")
        return profile_from_payload(data)

    # Records

    def fetch_transactions(self, token: str) -> list[Transaction]:
        data = self._request("GET", "/api/Transacoes", token=token)
        return transactions_from_payload(data, self._logger)

    def fetch_investments(self, token: str) -> list[Investment]:
        data = self._request("GET", "/api/Investimentos", token=token)
        return investments_from_payload(data, self._logger)

    def _request(
        self,
        method: str,
        endpoint: str,
        token: str | None = None,
        json: Mapping | None = None,
    ) -> Any:
        """Send a request and unwrap the response envelope.

        Args:
            method: HTTP method.
            endpoint: Path appended to the base URL.
            token: Optional bearer token.
            json: Optional JSON body.

        Returns:
            Any: The ``data`` member of the envelope.

        Raises:
            KashApiError: On transport errors, non-2xx statuses, undecodable
                bodies, or ``success == false``.
        """
        url = f"{self._settings.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._http.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as exc:
            self._logger.error(f"{method} {endpoint} failed: {exc}")
            raise KashApiError(f"Request to {endpoint} failed: {exc}") from exc

        if not response.ok:
            self._logger.error(
                f"{method} {endpoint} returned {response.status_code}"
            )
            raise KashApiError(
                f"API Error: {response.status_code}",
                status_code=response.status_code,
            )
        if not response.content:
            return None

        try:
            envelope = response.json()
        except ValueError as exc:
            raise KashApiError(
                f"Invalid JSON from {endpoint}",
                status_code=response.status_code,
            ) from exc

        if not isinstance(envelope, Mapping):
            return envelope
        if envelope.get("success") is False:
            message = envelope.get("message") or f"{endpoint} was rejected"
            self._logger.warning(f"{method} {endpoint} rejected: {message}")
            raise KashApiError(message, status_code=response.status_code)
        return envelope.get("data")

    @staticmethod
    def _extract_token(data: Any, fallback_message: str) -> str:
        token = data.get("token") if isinstance(data, Mapping) else None
        if not token:
            raise KashApiError(fallback_message)
        return token


__all__ = ["KashApiClient"]

"""Transporte REST por defecto (httpx).

Responsabilidad:
- Ejecutar la llamada con el hashed key como query param `hashedKey`.
- Traducir fallos de httpx a `TransportError` con su categoría.
- No reintenta: la política de reintentos es del host.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

import httpx

from adapters.http_client import build_client
from core.config import SdkSettings
from core.errors import TransportError, TransportErrorKind

logger = logging.getLogger(__name__)

_BODY_PREVIEW_CHARS = 500


class HttpxRestTransport:
    """Implementación de `core.interfaces.rest.RestTransport` sobre `httpx.Client`."""

    def __init__(
        self,
        settings: SdkSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or SdkSettings()
        self._client = client or build_client(self._settings)
        self._user_agent = self._settings.user_agent

    def set_user_agent(self, user_agent: str) -> None:
        self._user_agent = user_agent

    def get_user_agent(self) -> str:
        return self._user_agent

    def perform_call(
        self,
        url: str,
        hashed_key: str,
        payload: Mapping[str, Any] | Sequence[Any] | None = None,
        *,
        method: str | None = None,
    ) -> Any:
        method = (method or ("POST" if payload is not None else "GET")).upper()
        logger.debug("%s %s", method, url, extra={"url": url})

        try:
            response = self._client.request(
                method,
                url,
                params={"hashedKey": hashed_key},
                json=payload,
                headers={"User-Agent": self._user_agent},
            )
        except httpx.HTTPError as exc:
            logger.warning("Transport failure calling %s: %s", url, exc, extra={"url": url})
            raise TransportError(
                "Connection to the elefunds API failed.",
                1347889008130,
                TransportErrorKind.TRANSPORT,
                f"{type(exc).__name__}: {exc}",
            ) from exc

        if not response.is_success:
            body = response.text[:_BODY_PREVIEW_CHARS]
            raise TransportError(
                "The elefunds API rejected the request.",
                1347889008131,
                TransportErrorKind.REMOTE_REJECTED,
                f"status={response.status_code} body={body}",
            )

        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TransportError(
                "The elefunds API returned a malformed response.",
                1347889008132,
                TransportErrorKind.PROTOCOL,
                response.text[:_BODY_PREVIEW_CHARS],
            ) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxRestTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

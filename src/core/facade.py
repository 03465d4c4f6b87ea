"""Facade: único punto de coordinación expuesto a la página del host.

Por qué una Facade:
- El host solo conoce `set_configuration`, `render_template` y los getters de
  assets; transporte, vista y registro quedan detrás de la configuración.
- Sin estado propio salvo la configuración ligada (una por request).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from core.configuration import BaseConfiguration
from core.errors import ConfigurationError, StateError, TransportError, TransportErrorKind
from core.interfaces.rest import RestTransport
from core.interfaces.view import TemplateView

logger = logging.getLogger(__name__)

_RECEIVER_FIELDS = ("id", "name", "description", "images", "valid")


class Facade:
    """Orquesta el ciclo request/response contra el API y el render local."""

    def __init__(self, configuration: BaseConfiguration | None = None) -> None:
        self._configuration: BaseConfiguration | None = None
        if configuration is not None:
            self.set_configuration(configuration)

    def set_configuration(self, configuration: BaseConfiguration) -> "Facade":
        """Liga la configuración, fija su back-reference y llama a `init()` una vez."""

        self._configuration = configuration
        configuration.set_facade(self)
        configuration.init()
        return self

    def get_configuration(self) -> BaseConfiguration:
        if self._configuration is None:
            raise StateError("No configuration bound; call set_configuration() first.", 1347889008111)
        return self._configuration

    # Vista

    def render_template(self, name: str | None = None) -> str:
        return self._require_view().render_template(name)

    def get_printable_css_tag_strings(self) -> str:
        return "\n".join(self._require_view().get_css_tag_strings())

    def get_printable_javascript_tag_strings(self) -> str:
        return "\n".join(self._require_view().get_javascript_tag_strings())

    # Modelos

    def create_donation(self, **attributes: Any) -> Any:
        return self.get_configuration().get_model_registry().create_donation(**attributes)

    def create_receiver(self, **attributes: Any) -> Any:
        return self.get_configuration().get_model_registry().create_receiver(**attributes)

    # API remoto

    def get_receivers(self) -> list[Any]:
        """Receivers disponibles para el countrycode configurado."""

        config = self.get_configuration()
        countrycode = config.get_countrycode()
        url = f"{self._api_url()}/receivers/for/{countrycode}"
        data = self._call(url)

        receivers = data.get("receivers") if isinstance(data, dict) else None
        if isinstance(receivers, dict):
            receivers = receivers.get(countrycode)
        if not isinstance(receivers, list):
            raise TransportError(
                "Unexpected receivers response from the API.",
                1347889008120,
                TransportErrorKind.PROTOCOL,
                f"url={url}",
            )

        out: list[Any] = []
        for raw in receivers:
            if not isinstance(raw, dict):
                raise TransportError(
                    "Receiver entry is not an object.",
                    1347889008121,
                    TransportErrorKind.PROTOCOL,
                    repr(raw)[:200],
                )
            attributes = {k: raw[k] for k in _RECEIVER_FIELDS if k in raw}
            attributes["countrycode"] = countrycode
            try:
                out.append(self.create_receiver(**attributes))
            except ValueError as exc:
                raise TransportError(
                    "Receiver entry does not match the receiver model.",
                    1347889008121,
                    TransportErrorKind.PROTOCOL,
                    str(exc),
                ) from exc
        logger.debug("Fetched %d receivers for %s", len(out), countrycode)
        return out

    def add_donations(self, donations: Iterable[Any]) -> Any:
        payload = [_donation_payload(d) for d in donations]
        if not payload:
            return None
        return self._call(f"{self._api_url()}/donations", payload, method="POST")

    def cancel_donations(self, foreign_ids: Sequence[str | int]) -> Any:
        if not foreign_ids:
            return None
        return self._call(self._donations_url(foreign_ids), method="DELETE")

    def complete_donations(self, foreign_ids: Sequence[str | int]) -> Any:
        if not foreign_ids:
            return None
        return self._call(self._donations_url(foreign_ids), method="PUT")

    # Internos

    def _require_view(self) -> TemplateView:
        view = self.get_configuration().get_view()
        if view is None:
            raise StateError("Configuration has no view set.", 1347889008112)
        return view

    def _require_rest(self) -> RestTransport:
        rest = self.get_configuration().get_rest_implementation()
        if rest is None:
            raise StateError("Configuration has no rest implementation set.", 1347889008113)
        return rest

    def _api_url(self) -> str:
        url = self.get_configuration().get_api_url()
        if not url:
            raise ConfigurationError("API url is not set.", 1347889008109)
        return url

    def _donations_url(self, foreign_ids: Sequence[str | int]) -> str:
        return f"{self._api_url()}/donations/{','.join(str(i) for i in foreign_ids)}"

    def _call(self, url: str, payload: Any = None, *, method: str | None = None) -> Any:
        rest = self._require_rest()
        hashed_key = self.get_configuration().get_hashed_key()
        return rest.perform_call(url, hashed_key, payload, method=method)


def _donation_payload(donation: Any) -> dict[str, Any]:
    to_payload = getattr(donation, "to_api_payload", None)
    if callable(to_payload):
        return to_payload()
    if isinstance(donation, dict):
        return dict(donation)
    raise ConfigurationError(
        f"Cannot serialize donation of type {type(donation).__name__}.",
        1347889008114,
        "Implement to_api_payload() on custom donation implementations.",
    )

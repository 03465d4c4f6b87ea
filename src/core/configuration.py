"""Configuración base de una integración elefunds.

Por qué una clase (y no solo settings):
- Agrupa credenciales, transporte, vista y registro de modelos de un checkout.
- Las subclases sobrescriben `init()` para preparar la vista una vez ligadas
  a la `Facade` (p.ej. pre-cargar receivers).

Estados: sin credenciales -> parcial -> credencial derivable -> ligada a Facade.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from core.config import SDK_MODULE, SDK_VERSION, SdkSettings
from core.credentials import derive_hashed_key
from core.domain.registry import Implementation, ModelRegistry
from core.errors import ConfigurationError, StateError, ValidationError
from core.interfaces.rest import RestTransport
from core.interfaces.view import TemplateView

if TYPE_CHECKING:
    from core.facade import Facade


class BaseConfiguration:
    """Bundle mutable por checkout; todos los setters devuelven `self`."""

    def __init__(
        self,
        *,
        rest: RestTransport | None = None,
        view: TemplateView | None = None,
        model_registry: ModelRegistry | None = None,
    ) -> None:
        self._client_id: int | None = None
        self._api_key: str | None = None
        self._hashed_key: str | None = None
        self._api_url: str | None = None
        self._countrycode = "en"
        self._donation_class_name: str | None = None
        self._receiver_class_name: str | None = None
        self._available_share_services: list[str] = []
        self._rest = rest
        self._view = view
        self._model_registry = model_registry or ModelRegistry()
        self._facade_ref: weakref.ReferenceType[Facade] | None = None

    @classmethod
    def from_settings(cls, settings: SdkSettings | None = None, **kwargs: Any) -> "BaseConfiguration":
        """Crea la configuración con credenciales/url/countrycode del entorno."""

        return cls(**kwargs).apply_settings(settings or SdkSettings())

    def apply_settings(self, settings: SdkSettings) -> "BaseConfiguration":
        self.set_api_url(settings.api_url)
        self.set_countrycode(settings.countrycode)
        if settings.client_id is not None:
            self.set_client_id(settings.client_id)
        if settings.api_key:
            self.set_api_key(settings.api_key)
        return self

    def init(self) -> None:
        """Hook invocado una vez por la Facade justo después del binding."""

    # Facade

    def set_facade(self, facade: Facade) -> "BaseConfiguration":
        self._facade_ref = weakref.ref(facade)
        return self

    @property
    def facade(self) -> Facade:
        facade = self._facade_ref() if self._facade_ref is not None else None
        if facade is None:
            raise StateError("Configuration is not bound to a facade.", 1347889008110)
        return facade

    # Credenciales

    def set_client_id(self, client_id: int) -> "BaseConfiguration":
        try:
            self._client_id = int(client_id)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                "Given clientId must be an integer.",
                1347889008105,
                f"got {client_id!r}",
            ) from exc
        if self._api_key is not None and self._hashed_key is None:
            self._hashed_key = derive_hashed_key(self._client_id, self._api_key)
        return self

    def get_client_id(self) -> int | None:
        return self._client_id

    def set_api_key(self, api_key: str) -> "BaseConfiguration":
        if not isinstance(api_key, str) or not api_key:
            raise ValidationError(
                "Given apiKey must be a non-empty string.",
                1347889008106,
                f"got {api_key!r}",
            )
        self._api_key = api_key
        if self._client_id is not None and self._hashed_key is None:
            self._hashed_key = derive_hashed_key(self._client_id, self._api_key)
        return self

    def get_hashed_key(self) -> str:
        """Devuelve el hashed key (cacheado tras el primer cálculo).

        El cache no se invalida si luego cambian client id o api key.
        """

        if self._hashed_key is None:
            if self._client_id is None or self._api_key is None:
                raise ConfigurationError(
                    "HashedKey could not be calculated: credential fields missing. "
                    "Make sure that both clientId and apiKey are set.",
                    1347889008107,
                )
            self._hashed_key = derive_hashed_key(self._client_id, self._api_key)
        return self._hashed_key

    # API

    def set_api_url(self, url: str) -> "BaseConfiguration":
        """Guarda la URL sin barras finales.

        No se valida aquí: una URL mal formada aflora como `TransportError`
        cuando el transporte la usa.
        """

        self._api_url = str(url).rstrip("/")
        return self

    def get_api_url(self) -> str | None:
        return self._api_url

    def set_countrycode(self, countrycode: str) -> "BaseConfiguration":
        if not isinstance(countrycode, str) or len(countrycode) != 2:
            raise ValidationError(
                "Given countrycode must be a two digit string.",
                1347965897,
                f"got {countrycode!r}",
            )
        self._countrycode = countrycode
        return self

    def get_countrycode(self) -> str:
        return self._countrycode

    # Estrategias

    def set_rest_implementation(self, rest: RestTransport) -> "BaseConfiguration":
        self._rest = rest
        return self

    def get_rest_implementation(self) -> RestTransport | None:
        return self._rest

    def set_view(self, view: TemplateView) -> "BaseConfiguration":
        self._view = view
        return self

    def get_view(self) -> TemplateView | None:
        return self._view

    def set_model_registry(self, registry: ModelRegistry) -> "BaseConfiguration":
        self._model_registry = registry
        return self

    def get_model_registry(self) -> ModelRegistry:
        return self._model_registry

    def set_donation_class_name(self, implementation: Implementation) -> "BaseConfiguration":
        """Registra la clase de Donation (clase, factory o path importable)."""

        self._model_registry.set_donation_implementation(implementation)
        self._donation_class_name = _implementation_name(implementation)
        return self

    def get_donation_class_name(self) -> str | None:
        return self._donation_class_name

    def set_receiver_class_name(self, implementation: Implementation) -> "BaseConfiguration":
        """Registra la clase de Receiver (clase, factory o path importable)."""

        self._model_registry.set_receiver_implementation(implementation)
        self._receiver_class_name = _implementation_name(implementation)
        return self

    def get_receiver_class_name(self) -> str | None:
        return self._receiver_class_name

    def set_available_share_services(self, services: list[str]) -> "BaseConfiguration":
        self._available_share_services = [str(s) for s in services]
        return self

    def get_available_share_services(self) -> list[str]:
        return list(self._available_share_services)

    def set_version_and_module_identifier(
        self,
        version: str = SDK_VERSION,
        module: str = SDK_MODULE,
    ) -> "BaseConfiguration":
        """Envía '<module> v<version>' como User-Agent al transporte actual."""

        if self._rest is None:
            raise ConfigurationError(
                "No rest implementation set; cannot forward the user agent.",
                1347889008108,
            )
        self._rest.set_user_agent(f"{module} v{version}")
        return self


def _implementation_name(implementation: Implementation) -> str:
    if isinstance(implementation, str):
        return implementation
    module = getattr(implementation, "__module__", None)
    qualname = getattr(implementation, "__qualname__", None) or repr(implementation)
    return f"{module}.{qualname}" if module else qualname

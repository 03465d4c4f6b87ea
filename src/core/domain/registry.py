"""Registro de implementaciones de Donation/Receiver.

Por qué un objeto explícito (y no estado global):
- Cada `BaseConfiguration` posee su `ModelRegistry`; dos requests concurrentes
  no se pisan la selección de clases.
- Si el host quiere compartir la selección, pasa la misma instancia a varias
  configuraciones (registrar una vez al arrancar).

Una implementación puede ser una clase, un factory sin argumentos o un path
importable ("pkg.mod.Clase" o "pkg.mod:Clase").
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Callable, Union

from core.domain.models import Donation, Receiver
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DONATION = "donation"
RECEIVER = "receiver"

_UNKNOWN_IMPLEMENTATION_CODES = {
    DONATION: 1347893442819,
    RECEIVER: 1347893442820,
}

Implementation = Union[type, Callable[[], Any], str]


def _import_dotted(path: str) -> Any:
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise ImportError(f"'{path}' is not a dotted import path")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def _is_default_constructible(factory: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        # Builtins sin firma introspectable: se aceptan.
        return True
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


def resolve_implementation(kind: str, implementation: Implementation) -> Callable[[], Any]:
    """Resuelve `implementation` a un callable sin argumentos.

    Lanza `ConfigurationError` si no se puede importar, no es invocable o
    requiere argumentos en el constructor.
    """

    code = _UNKNOWN_IMPLEMENTATION_CODES[kind]
    target: Any = implementation
    if isinstance(implementation, str):
        try:
            target = _import_dotted(implementation)
        except (ImportError, AttributeError) as exc:
            raise ConfigurationError(
                f"Unknown implementation type '{implementation}' for {kind}.",
                code,
                str(exc),
            ) from exc

    if not callable(target):
        raise ConfigurationError(
            f"Unknown implementation type {implementation!r} for {kind}: not a class or factory.",
            code,
        )
    if not _is_default_constructible(target):
        raise ConfigurationError(
            f"Implementation {implementation!r} for {kind} must be constructible without arguments.",
            code,
        )
    return target


class ModelRegistry:
    """Dos slots: implementación actual de Donation y de Receiver."""

    def __init__(
        self,
        donation_implementation: Implementation = Donation,
        receiver_implementation: Implementation = Receiver,
    ) -> None:
        self._implementations: dict[str, Callable[[], Any]] = {
            DONATION: resolve_implementation(DONATION, donation_implementation),
            RECEIVER: resolve_implementation(RECEIVER, receiver_implementation),
        }

    def set_donation_implementation(self, implementation: Implementation) -> "ModelRegistry":
        return self._register(DONATION, implementation)

    def set_receiver_implementation(self, implementation: Implementation) -> "ModelRegistry":
        return self._register(RECEIVER, implementation)

    def get_donation_implementation(self) -> Callable[[], Any]:
        return self._implementations[DONATION]

    def get_receiver_implementation(self) -> Callable[[], Any]:
        return self._implementations[RECEIVER]

    def create(self, kind: str, **attributes: Any) -> Any:
        """Instancia la implementación registrada para `kind` y asigna `attributes`."""

        try:
            factory = self._implementations[kind]
        except KeyError:
            raise ConfigurationError(f"Unknown model kind '{kind}'.", 1347893442821) from None

        instance = factory()
        for name, value in attributes.items():
            setattr(instance, name, value)
        return instance

    def create_donation(self, **attributes: Any) -> Any:
        return self.create(DONATION, **attributes)

    def create_receiver(self, **attributes: Any) -> Any:
        return self.create(RECEIVER, **attributes)

    def _register(self, kind: str, implementation: Implementation) -> "ModelRegistry":
        self._implementations[kind] = resolve_implementation(kind, implementation)
        logger.debug("Registered %s implementation %r", kind, implementation)
        return self

"""Jerarquía de errores del SDK.

Por qué una única base (`ElefundsException`):
- El host puede capturar todo lo que lanza el SDK con un solo `except` y
  degradar la página (p.ej. renderizar el checkout sin el widget).
- Cada error lleva un código numérico estable + texto de diagnóstico libre.
"""

from __future__ import annotations

from enum import Enum


class TransportErrorKind(str, Enum):
    """Categorías de fallo de una llamada remota."""

    TRANSPORT = "transport"
    REMOTE_REJECTED = "remote-rejected"
    PROTOCOL = "protocol"


class ElefundsException(Exception):
    """Base de todos los errores del SDK."""

    def __init__(
        self,
        message: str,
        code: int,
        additional_information: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.additional_information = additional_information

    def __str__(self) -> str:
        if self.additional_information:
            return f"{self.message} [{self.code}] ({self.additional_information})"
        return f"{self.message} [{self.code}]"


class ConfigurationError(ElefundsException):
    """Campo requerido ausente o inválido en la configuración."""


class ValidationError(ConfigurationError, ValueError):
    """Valor rechazado por un setter (p.ej. countrycode mal formado)."""


class StateError(ElefundsException):
    """Operación invocada antes del binding necesario."""


class ViewError(ElefundsException):
    """Template desconocido o variable requerida sin asignar."""


class TransportError(ElefundsException):
    """Fallo de red, rechazo remoto o respuesta mal formada."""

    def __init__(
        self,
        message: str,
        code: int,
        kind: TransportErrorKind,
        additional_information: str | None = None,
    ) -> None:
        super().__init__(message, code, additional_information)
        self.kind = kind

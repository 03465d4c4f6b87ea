"""Contrato del transporte REST.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El host puede sustituir httpx por su propio cliente (o un stub en tests).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RestTransport(Protocol):
    """Capacidades mínimas del transporte.

    Reglas de diseño:
    - `perform_call` es bloqueante y devuelve el cuerpo ya parseado.
    - Los fallos se lanzan como `core.errors.TransportError`.
    - Timeouts y reintentos son responsabilidad de la implementación.
    """

    def perform_call(
        self,
        url: str,
        hashed_key: str,
        payload: Mapping[str, Any] | Sequence[Any] | None = None,
        *,
        method: str | None = None,
    ) -> Any:
        """Ejecuta la llamada. Sin `method`: POST si hay payload, GET si no."""

        ...

    def set_user_agent(self, user_agent: str) -> None:
        ...

"""Contrato de la vista (render de templates + assets)."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateView(Protocol):
    """Render por sustitución de variables.

    - `assign` es last-write-wins.
    - `render_template(None)` usa el template por defecto de la vista.
    - Template inexistente o variable sin asignar -> `core.errors.ViewError`.
    """

    def assign(self, name: str, value: Any) -> None:
        ...

    def render_template(self, name: str | None = None) -> str:
        ...

    def get_css_tag_strings(self) -> list[str]:
        ...

    def get_javascript_tag_strings(self) -> list[str]:
        ...

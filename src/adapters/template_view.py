"""Vista por defecto (Jinja2).

Por qué está en adapters:
- Jinja2 es un detalle de infraestructura; el Core solo conoce `TemplateView`.

Convenciones:
- Nombre lógico "Shop" -> `Shop/View.html` dentro de los directorios de templates.
- `StrictUndefined`: una variable no asignada es un error, no un string vacío.
- Filtro `money`: céntimos enteros -> "9.60".
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    UndefinedError,
    select_autoescape,
)

from core.errors import ViewError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_FILENAME = "View.html"


def format_money(cents: Any, decimal_separator: str = ".") -> str:
    """Formatea céntimos enteros con dos decimales (960 -> '9.60')."""

    value = (Decimal(int(cents)) / Decimal(100)).quantize(Decimal("0.01"))
    return f"{value}".replace(".", decimal_separator)


class JinjaTemplateView:
    """Implementación de `core.interfaces.view.TemplateView` sobre Jinja2."""

    def __init__(
        self,
        default_template: str = "Shop",
        *,
        template_dirs: Iterable[Path | str] | None = None,
    ) -> None:
        dirs = [Path(d) for d in (template_dirs or [])]
        dirs.append(TEMPLATES_DIR)
        self._default_template = default_template
        self._variables: dict[str, Any] = {}
        self._css_files: list[str] = []
        self._javascript_files: list[str] = []
        self._env = Environment(
            loader=FileSystemLoader([str(d) for d in dirs]),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
        )
        self._env.filters["money"] = format_money

    @property
    def default_template(self) -> str:
        return self._default_template

    def assign(self, name: str, value: Any) -> None:
        self._variables[name] = value

    def assign_multiple(self, values: Mapping[str, Any]) -> None:
        self._variables.update(values)

    def get_assigned(self, name: str, default: Any = None) -> Any:
        return self._variables.get(name, default)

    def add_css_file(self, href: str) -> None:
        if href not in self._css_files:
            self._css_files.append(href)

    def add_javascript_file(self, src: str) -> None:
        if src not in self._javascript_files:
            self._javascript_files.append(src)

    def get_css_tag_strings(self) -> list[str]:
        return [f'<link rel="stylesheet" type="text/css" href="{href}">' for href in self._css_files]

    def get_javascript_tag_strings(self) -> list[str]:
        return [f'<script type="text/javascript" src="{src}"></script>' for src in self._javascript_files]

    def render_template(self, name: str | None = None) -> str:
        name = name or self._default_template
        path = f"{name}/{TEMPLATE_FILENAME}"
        try:
            template = self._env.get_template(path)
        except TemplateNotFound as exc:
            raise ViewError(f"Template '{name}' not found.", 1347889008140, path) from exc

        try:
            return template.render(**self._variables)
        except UndefinedError as exc:
            logger.warning("Template %s rendered with missing variable: %s", name, exc, extra={"template": name})
            raise ViewError(
                f"Template '{name}' requires a variable that was never assigned.",
                1347889008141,
                str(exc),
            ) from exc

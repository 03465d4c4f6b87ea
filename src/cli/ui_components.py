"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.errors import ElefundsException


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("elefunds SDK", style="bold cyan")
    subtitle = Text("Donaciones en el checkout • Receivers • Templates", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_receivers_table(receivers: Iterable[Any]) -> Table:
    """Tabla Rich con los receivers obtenidos del API."""

    table = Table(title="Receivers")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for receiver in receivers:
        table.add_row(
            str(getattr(receiver, "id", "")),
            str(getattr(receiver, "name", "")),
            str(getattr(receiver, "description", "")),
        )
    return table


def build_error_panel(exc: ElefundsException) -> Panel:
    """Panel para presentar un error del SDK con su código."""

    body = Text()
    body.append(exc.message + "\n", style="bold")
    body.append(f"Code: {exc.code}", style="dim")
    if exc.additional_information:
        body.append(f"\n{exc.additional_information}", style="dim")
    return Panel(body, title=type(exc).__name__, border_style="red")

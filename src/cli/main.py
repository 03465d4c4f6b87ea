"""CLI de desarrollo del SDK (Typer).

Por qué una CLI en un SDK embebible:
- Previsualizar los templates con la configuración real sin montar una tienda.
- Diagnóstico rápido (credenciales, conectividad) vía `doctor`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.rest_client import HttpxRestTransport
from adapters.template_view import JinjaTemplateView
from cli import doctor
from cli.ui_components import build_error_panel, build_receivers_table, print_banner
from core.config import SdkSettings
from core.configuration import BaseConfiguration
from core.errors import ElefundsException
from core.facade import Facade
from core.logging_utils import setup_logging
from core.services.shop import (
    CheckoutSuccessConfiguration,
    ShopConfiguration,
    WidgetOptions,
    settings_from_env_file,
)

app = typer.Typer(no_args_is_help=True, help="elefunds checkout SDK tools.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _settings(ctx: typer.Context) -> SdkSettings:
    return ctx.obj if isinstance(ctx.obj, SdkSettings) else SdkSettings()


@app.callback()
def main(
    ctx: typer.Context,
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Read settings from this .env file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    settings = settings_from_env_file(env_file) if env_file else SdkSettings()
    ctx.obj = settings
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)


def build_page(facade: Facade, template: str | None, title: str = "My Shop") -> str:
    """Página HTML mínima, como la montaría una tienda."""

    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta http-equiv="content-type" content="text/html; charset=utf-8">',
            f"<title>{title}</title>",
            facade.get_printable_css_tag_strings(),
            "</head>",
            "<body>",
            facade.render_template(template),
            facade.get_printable_javascript_tag_strings(),
            "</body>",
            "</html>",
        ]
    )


def _offline_configuration(settings: SdkSettings, template: str) -> BaseConfiguration:
    template_dirs = [settings.templates_dir] if settings.templates_dir else None
    view = JinjaTemplateView(template, template_dirs=template_dirs)
    options = WidgetOptions()
    view.assign_multiple(
        {
            "countrycode": settings.countrycode,
            "currency": options.currency,
            "skin": {"theme": options.theme, "color": options.color},
            "receivers": [],
            "shareServices": options.share_services,
        }
    )
    config = BaseConfiguration(view=view)
    config.set_countrycode(settings.countrycode)
    return config


@app.command()
def render(
    ctx: typer.Context,
    template: str = typer.Argument("Shop", help="Template name: Shop or CheckoutSuccess."),
    total: int = typer.Option(960, "--total", help="Order total in cents (Shop)."),
    foreign_id: str = typer.Option("1234", "--foreign-id", help="Order id (CheckoutSuccess)."),
    theme: str = typer.Option("light", "--theme"),
    color: str = typer.Option("#00efa2", "--color"),
    offline: bool = typer.Option(False, "--offline", help="Do not call the API (empty receiver list)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the page to this file."),
) -> None:
    """Render a full example page for a template."""

    settings = _settings(ctx)
    config: BaseConfiguration | None = None
    try:
        if offline:
            config = _offline_configuration(settings, template)
        elif template == "CheckoutSuccess":
            config = CheckoutSuccessConfiguration(settings)
        else:
            config = ShopConfiguration(settings)
        facade = Facade(config)
        view = config.get_view()
        view.assign("sumExcludingDonation", total)
        view.assign("foreignId", foreign_id)
        view.assign("skin", {"theme": theme, "color": color})
        page = build_page(facade, template)
    except ElefundsException as exc:
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc
    finally:
        rest = config.get_rest_implementation() if config is not None else None
        if isinstance(rest, HttpxRestTransport):
            rest.close()

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(page + "\n", encoding="utf-8")
        _console.print(f"[green]Page written to:[/green] {output}")
    else:
        typer.echo(page)


@app.command()
def receivers(
    ctx: typer.Context,
    countrycode: Optional[str] = typer.Option(None, "--countrycode", "-c"),
) -> None:
    """List the receivers the API offers for a countrycode."""

    settings = _settings(ctx)
    print_banner(_console)
    try:
        config = BaseConfiguration.from_settings(settings)
        with HttpxRestTransport(settings) as rest:
            config.set_rest_implementation(rest)
            if countrycode:
                config.set_countrycode(countrycode)
            found = Facade(config).get_receivers()
    except ElefundsException as exc:
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    _console.print(build_receivers_table(found))


def run() -> None:
    app()


if __name__ == "__main__":
    run()

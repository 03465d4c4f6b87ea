"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.rest_client import HttpxRestTransport
from adapters.template_view import JinjaTemplateView
from core.config import SdkSettings, write_user_env_vars
from core.configuration import BaseConfiguration
from core.errors import ElefundsException
from core.facade import Facade

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_credentials(config: BaseConfiguration) -> tuple[bool, str]:
    try:
        hashed = config.get_hashed_key()
    except ElefundsException as exc:
        return False, exc.message
    return True, f"hashedKey {hashed[:8]}…"


def _check_receivers(config: BaseConfiguration) -> tuple[bool, str]:
    try:
        receivers = Facade(config).get_receivers()
    except ElefundsException as exc:
        return False, str(exc)
    return True, f"{len(receivers)} receivers for '{config.get_countrycode()}'"


def _check_templates(settings: SdkSettings) -> tuple[bool, str]:
    template_dirs = [settings.templates_dir] if settings.templates_dir else None
    view = JinjaTemplateView(template_dirs=template_dirs)
    view.assign_multiple(
        {
            "sumExcludingDonation": 0,
            "currency": "€",
            "countrycode": settings.countrycode,
            "skin": {"theme": "light", "color": "#00efa2"},
            "receivers": [],
        }
    )
    try:
        view.render_template("Shop")
    except ElefundsException as exc:
        return False, str(exc)
    return True, "OK"


@app.command()
def run(
    ctx: typer.Context,
    offline: bool = typer.Option(False, "--offline", help="Skip the API connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ctx.obj if isinstance(ctx.obj, SdkSettings) else SdkSettings()

    table = Table(title="elefunds SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    with HttpxRestTransport(settings) as rest:
        config = BaseConfiguration.from_settings(settings, rest=rest)
        table.add_row("API url", "OK", config.get_api_url() or "")

        ok_creds, detail_creds = _check_credentials(config)
        table.add_row("Credentials", "OK" if ok_creds else "FAIL", detail_creds)

        if offline or not ok_creds:
            table.add_row("API receivers", "SKIPPED", "offline" if offline else "no credentials")
        else:
            ok_api, detail_api = _check_receivers(config)
            table.add_row("API receivers", "OK" if ok_api else "FAIL", detail_api)

    ok_tpl, detail_tpl = _check_templates(settings)
    table.add_row("Templates", "OK" if ok_tpl else "FAIL", detail_tpl)

    _console.print(table)

    if not ok_creds:
        _console.print(
            "\n[yellow]Note:[/yellow] run `elefunds-sdk doctor setup` or set ELEFUNDS_CLIENT_ID / ELEFUNDS_API_KEY."
        )


@app.command()
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env)."""

    client_id = typer.prompt("Client id", type=int)
    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()
    api_url = typer.prompt("API url", default=SdkSettings.model_fields["api_url"].default, show_default=True).strip()
    countrycode = typer.prompt("Countrycode", default="en", show_default=True).strip()

    if not api_key:
        raise typer.BadParameter("api key is required")
    if len(countrycode) != 2:
        raise typer.BadParameter("countrycode must have two characters")

    env_path = write_user_env_vars(
        {
            "ELEFUNDS_CLIENT_ID": str(client_id),
            "ELEFUNDS_API_KEY": api_key,
            "ELEFUNDS_API_URL": api_url.rstrip("/"),
            "ELEFUNDS_COUNTRYCODE": countrycode,
        }
    )

    _console.print(f"[green]Saved elefunds config to:[/green] {env_path}")

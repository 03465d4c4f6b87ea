"""Configuración de entorno del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin que `BaseConfiguration`
  dependa del entorno: el host puede configurar todo por setters.
- Permite que adaptadores (HTTP/templates) y la CLI lean defaults de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "2.0.0"
SDK_MODULE = "elefunds-sdk"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "elefunds-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "elefunds-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "elefunds-sdk"
    return Path.home() / ".config" / "elefunds-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; los valores `None` se ignoran.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# elefunds-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class SdkSettings(BaseSettings):
    """Defaults del SDK leídos del entorno.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato para configuraciones, adaptadores y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="ELEFUNDS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    client_id: int | None = Field(
        default=None,
        ge=0,
        description="Client id asignado por elefunds.",
    )
    api_key: str | None = Field(
        default=None,
        description="API key secreta; nunca se envía en claro.",
    )
    api_url: str = Field(
        default="https://connect.elefunds.de",
        min_length=8,
        description="Base URL del API de donaciones.",
    )
    countrycode: str = Field(
        default="en",
        min_length=2,
        max_length=2,
        description="Código de país de dos letras para receivers y templates.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"{SDK_MODULE} v{SDK_VERSION}",
        min_length=1,
        description="User-Agent inicial del transporte HTTP.",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Directorio adicional de templates (tiene prioridad sobre los incluidos).",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para la CLI.",
    )
    log_format: str = Field(
        default="text",
        pattern="^(text|json)$",
        description="Formato de logs: 'text' o 'json'.",
    )

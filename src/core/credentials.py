"""Derivación del hashed key.

El API remoto verifica `sha1(str(client_id) + api_key)` sin separador; el
formato es fijo. Nota: pares como (1, "23") y (12, "3") producen el mismo
digest porque la concatenación no es inyectiva.
"""

from __future__ import annotations

import hashlib


def derive_hashed_key(client_id: int, api_key: str) -> str:
    """Devuelve el digest hex (minúsculas) de `client_id` concatenado con `api_key`."""

    raw = f"{int(client_id)}{api_key}"
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()

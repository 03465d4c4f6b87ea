"""Core del SDK: configuración, facade, credenciales, dominio y contratos.

Por qué separado de `adapters`:
- El Core solo depende de abstracciones (`core.interfaces`); httpx y Jinja2
  viven en adaptadores intercambiables.
"""

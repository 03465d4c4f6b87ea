"""Adaptadores de infraestructura (httpx, Jinja2) para los contratos del Core."""

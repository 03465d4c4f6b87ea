"""CLI de desarrollo (Typer + Rich)."""

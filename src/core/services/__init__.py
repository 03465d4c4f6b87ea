"""Servicios: configuraciones listas para usar que combinan Core y adaptadores."""

"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (transporte HTTP, motor de templates).
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.rest import RestTransport
from core.interfaces.view import TemplateView

__all__ = [
    "RestTransport",
    "TemplateView",
]

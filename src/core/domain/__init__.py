"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las entidades (Donation, Receiver) y el registro que decide
  qué clase concreta se instancia para cada una.
- El dominio no conoce HTTP ni templates.
"""

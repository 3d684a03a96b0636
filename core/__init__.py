# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "bruteforce",
    "config",
    "crypto_sym",
    "errors",
    "heuristic",
    "models",
    "padding",
    "storage",
]

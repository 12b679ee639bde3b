"""
Adapters package - External service connections.
"""

from adapters import open_meteo_adapter

__all__ = [
    "open_meteo_adapter",
]

"""
Domain layer: the configuration source port.
"""

from .ports import ConfigSource

__all__ = [
    "ConfigSource",
]

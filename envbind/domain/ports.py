"""
Domain ports for configuration binding.
Sources implement these so the binder never depends on where values live.
"""

from __future__ import annotations

from typing import Protocol


class ConfigSource(Protocol):
    def get_str(self, key: str) -> str: ...

    def get_int(self, key: str) -> int: ...

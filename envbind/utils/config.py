import os
from collections import ChainMap
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from .parsing import parse_int


class EnvConfig:
    """Environment-backed config source. Keys are upper-cased before lookup."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ = environ if environ is not None else os.environ

    def key(self, name: str) -> str:
        return name.upper()

    def _value(self, name: str) -> str:
        return self.environ.get(self.key(name)) or ""

    def get_str(self, key: str) -> str:
        """Returns the raw value, or "" when unset."""
        return self._value(key)

    def get_int(self, key: str) -> int:
        """Returns the value as a base-10 int; raises ConversionError otherwise."""
        return parse_int(self._value(key), key=self.key(key))


class DotenvConfig(EnvConfig):
    """
    Config source backed by a .env file.
    With include_env the process environment wins over the file,
    like load_dotenv(override=False).
    """

    def __init__(self, path: str | Path = ".env", *, include_env: bool = True) -> None:
        self.path = Path(path)
        values = {k.upper(): v for k, v in dotenv_values(self.path).items() if v is not None}
        super().__init__(ChainMap(os.environ, values) if include_env else values)

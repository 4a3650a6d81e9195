from .binder import BindResult, FieldResolution, Origin, bind, load_settings, parse

__all__ = [
    "bind",
    "parse",
    "load_settings",
    "BindResult",
    "FieldResolution",
    "Origin",
]

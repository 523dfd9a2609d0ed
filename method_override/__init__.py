from method_override.exceptions import MethodOverrideError, UnsupportedMethod
from method_override.methods import OVERRIDABLE_METHODS, OVERRIDE_PARAM, get_override, resolve_method
from method_override.middleware import MethodOverrideMiddleware
from method_override.urls import method_url_for, url_with_method
from method_override.wsgi import WSGIMethodOverrideMiddleware

__all__ = [
    "MethodOverrideMiddleware",
    "WSGIMethodOverrideMiddleware",
    "OVERRIDE_PARAM",
    "OVERRIDABLE_METHODS",
    "get_override",
    "resolve_method",
    "url_with_method",
    "method_url_for",
    "MethodOverrideError",
    "UnsupportedMethod",
]

__version__ = "0.1.0"

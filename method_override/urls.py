import typing
from starlette.datastructures import URL
from starlette.requests import Request

from method_override.exceptions import UnsupportedMethod
from method_override.methods import OVERRIDABLE_METHODS, OVERRIDE_PARAM


def url_with_method(url: str | URL, method: str) -> URL:
    """Return URL that makes MethodOverrideMiddleware dispatch POST requests as `method`.
    Existing `_method` parameter is replaced."""
    if method not in OVERRIDABLE_METHODS:
        allowed = ", ".join(sorted(OVERRIDABLE_METHODS))
        raise UnsupportedMethod(f'Method "{method}" cannot be used as override. Choose from: {allowed}.')
    return URL(str(url)).include_query_params(**{OVERRIDE_PARAM: method})


def method_url_for(request: Request, name: str, method: str, **path_params: typing.Any) -> URL:
    """Return absolute URL for route with method override applied."""
    return url_with_method(request.url_for(name, **path_params), method)

import functools
import typing
import jinja2
from starlette.requests import Request

from method_override.urls import method_url_for, url_with_method


def configure_jinja_env(jinja_env: jinja2.Environment) -> None:
    """Install `with_method` filter: {{ url|with_method("DELETE") }}."""
    jinja_env.filters["with_method"] = url_with_method


def method_override_processor(request: Request) -> dict[str, typing.Any]:
    """Add `method_url(name, method, **path_params)` to the template context."""
    return {
        "method_url": functools.partial(method_url_for, request),
    }

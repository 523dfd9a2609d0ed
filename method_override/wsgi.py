import typing
from wsgiref.types import StartResponse, WSGIApplication, WSGIEnvironment

from method_override.methods import resolve_method


class WSGIMethodOverrideMiddleware:
    """WSGI counterpart of `MethodOverrideMiddleware`."""

    def __init__(self, app: WSGIApplication) -> None:
        self.app = app

    def __call__(self, environ: WSGIEnvironment, start_response: StartResponse) -> typing.Iterable[bytes]:
        environ["REQUEST_METHOD"] = resolve_method(environ["REQUEST_METHOD"], environ.get("QUERY_STRING", ""))
        return self.app(environ, start_response)

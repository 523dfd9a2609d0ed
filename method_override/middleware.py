from starlette.types import ASGIApp, Receive, Scope, Send

from method_override.methods import get_override


class MethodOverrideMiddleware:
    """
    Dispatch POST requests using the method given in the `_method` query parameter.

    Browsers submit HTML forms using GET or POST only. With this middleware installed,
    a form like this one reaches the application as a DELETE request:

        <form method="post" action="/items/1?_method=DELETE">

    Accepted overrides are PUT, PATCH and DELETE. Other requests are passed through as is.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        if scope["method"] == "POST":
            if override := get_override(scope.get("query_string", b"")):
                scope["method"] = override

        await self.app(scope, receive, send)

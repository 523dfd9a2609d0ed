from starlette.datastructures import QueryParams

OVERRIDE_PARAM = "_method"
OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


def get_override(query_string: str | bytes) -> str | None:
    """
    Return the method requested by the `_method` query parameter.

    Only the first `_method` parameter is taken into account.
    Values other than PUT, PATCH and DELETE are ignored, the match is case-sensitive.
    """
    values = QueryParams(query_string).getlist(OVERRIDE_PARAM)
    if values and values[0] in OVERRIDABLE_METHODS:
        return values[0]
    return None


def resolve_method(method: str, query_string: str | bytes) -> str:
    """Return the method the request should be dispatched with."""
    if method != "POST":
        return method
    return get_override(query_string) or method

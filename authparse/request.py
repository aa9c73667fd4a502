from dataclasses import dataclass, field

from starlette.datastructures import Headers

from authparse.constants import ANONYMOUS
from authparse.models import AuthorizationResult
from authparse.types import Scope


@dataclass
class AuthorizationRequest:
    """
    Framework-agnostic view of an inbound request.

    ``authorization`` and ``username`` are populated by the parser and
    live as long as the request does.
    """

    method: str
    target: str
    headers: Headers
    http_version: str = "1.1"
    authorization: AuthorizationResult = field(default_factory=AuthorizationResult)
    username: str | None = ANONYMOUS

    @classmethod
    def from_scope(cls, scope: Scope) -> "AuthorizationRequest":
        target = (scope.get("raw_path") or b"").decode("latin1") or scope.get("path", "/")
        query_string = scope.get("query_string") or b""
        if query_string:
            target = f"{target}?{query_string.decode('latin1')}"
        return cls(
            method=scope.get("method", "GET"),
            target=target,
            headers=Headers(raw=list(scope.get("headers", []))),
            http_version=scope.get("http_version", "1.1"),
        )

    @classmethod
    def from_header(cls, authorization: str | None, **headers: str) -> "AuthorizationRequest":
        raw_headers = {name.replace("_", "-"): value for name, value in headers.items()}
        if authorization is not None:
            raw_headers["authorization"] = authorization
        return cls(method="GET", target="/", headers=Headers(headers=raw_headers))

    @property
    def authorization_header(self) -> str | None:
        return self.headers.get("authorization")

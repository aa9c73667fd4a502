import json

from authparse.errors import AuthorizationError
from authparse.parser import AuthorizationParser
from authparse.request import AuthorizationRequest
from authparse.types import ASGIApp, ASGIReceive, ASGISend, Scope


class ASGIAuthorizationMiddleware:
    def __init__(self, app: ASGIApp, parser: AuthorizationParser):
        self.app = app
        self.parser = parser

    async def __call__(self, scope: Scope, receive: ASGIReceive, send: ASGISend):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        try:
            authorization, username = self.parser.parse(AuthorizationRequest.from_scope(scope))
        except AuthorizationError as e:
            await self.send_error(send, e)
            return

        scope["authorization"] = authorization
        scope["username"] = username
        return await self.app(scope, receive, send)

    async def send_error(self, send: ASGISend, error: AuthorizationError):
        await send(
            {
                "type": "http.response.start",
                "status": int(error.http_status),
                "headers": [
                    [b"content-type", b"application/json"],
                ],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": json.dumps({"code": error.code, "message": error.message}).encode("utf-8"),
            }
        )

from fastapi import HTTPException, Request

from authparse.errors import AuthorizationError
from authparse.models import AuthorizationResult
from authparse.parser import AuthorizationParser
from authparse.request import AuthorizationRequest


def build_fastapi_authorization_dependency(parser: AuthorizationParser):
    async def authorization_dependency(request: Request) -> AuthorizationResult:
        try:
            authorization, username = parser.parse(AuthorizationRequest.from_scope(request.scope))
        except AuthorizationError as e:
            raise HTTPException(status_code=e.http_status, detail=e.message)
        request.state.authorization = authorization
        request.state.username = username
        return authorization

    return authorization_dependency

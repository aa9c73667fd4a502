from http import HTTPStatus


class AuthorizationError(Exception):
    code = "Authorization"

    def __init__(self, http_status: HTTPStatus, message: str) -> None:
        super().__init__(message)
        self.http_status: HTTPStatus = http_status
        self.message: str = message


class InvalidHeaderError(AuthorizationError):
    code = "InvalidHeader"

    def __init__(self, message: str = "Authorization header invalid") -> None:
        super().__init__(HTTPStatus.BAD_REQUEST, message)


class SignatureError(Exception):
    pass


class InvalidParamsError(SignatureError):
    pass


class MissingHeaderError(SignatureError):
    pass


class ExpiredRequestError(SignatureError):
    pass


class StrictParsingError(SignatureError):
    pass

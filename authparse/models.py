from enum import Enum

from pydantic import BaseModel


class Scheme(str, Enum):
    BASIC = "basic"
    SIGNATURE = "signature"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> "Scheme":
        """
        Resolve the scheme token of an Authorization header.

        Matching is case-insensitive; anything that is not a supported
        scheme resolves to ``Scheme.UNKNOWN``.
        """
        lowered = token.lower()
        if lowered == cls.BASIC.value:
            return cls.BASIC
        if lowered == cls.SIGNATURE.value:
            return cls.SIGNATURE
        return cls.UNKNOWN


class BasicCredentials(BaseModel):
    username: str | None = None
    password: str | None = None


class ParsedSignature(BaseModel):
    scheme: str
    params: dict[str, str | list[str]]
    signing_string: str
    algorithm: str
    key_id: str


class AuthorizationResult(BaseModel):
    scheme: str | None = None
    credentials: str | None = None
    basic: BasicCredentials | None = None
    signature: ParsedSignature | None = None

import logging

from dynaconf.utils.boxing import DynaBox

from authparse.conf import Settings
from authparse.constants import ANONYMOUS
from authparse.credentials import decode_basic, split_authorization_header
from authparse.errors import InvalidHeaderError
from authparse.models import AuthorizationResult, Scheme
from authparse.request import AuthorizationRequest
from authparse.signature import (
    BaseSignatureParser,
    HTTPSignatureParser,
    decode_signature,
    get_signature_parser,
)
from authparse.types import NextCallback

logger = logging.getLogger("authparse")


class AuthorizationParser:
    """
    Parses the ``Authorization`` header of inbound requests.

    Basic and Signature schemes are decoded; any other scheme only
    exposes its raw ``scheme`` and ``credentials``. The username defaults
    to ``anonymous`` and is taken from the Basic username or the
    signature key id otherwise.
    """

    def __init__(
        self,
        options: DynaBox | dict | None = None,
        signature_parser: BaseSignatureParser | None = None,
    ):
        self.options = DynaBox(dict(options or {}))
        self.signature_parser = signature_parser or HTTPSignatureParser()

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthorizationParser":
        name = settings.signature.parser
        parser_cls = get_signature_parser(name)
        if not parser_cls:
            raise ValueError(f"Signature parser '{name}' is not registered.")
        return cls(settings.signature.get("options", {}), parser_cls())

    def parse(self, request: AuthorizationRequest) -> tuple[AuthorizationResult, str | None]:
        result = AuthorizationResult()
        username = self.populate(request, result)
        return result, username

    def populate(self, request: AuthorizationRequest, result: AuthorizationResult) -> str | None:
        """
        Fill ``result`` from the request header and return the username.

        ``scheme`` and ``credentials`` are recorded before the scheme is
        decoded, so they are kept on ``result`` when decoding fails.
        """
        authorization_header = request.authorization_header
        if not authorization_header:
            return ANONYMOUS

        try:
            scheme, credentials = split_authorization_header(authorization_header)
        except InvalidHeaderError:
            logger.warning("Rejected malformed authorization header")
            raise

        result.scheme = scheme
        result.credentials = credentials

        scheme_type = Scheme.from_token(scheme)
        logger.debug(f"Authorization scheme: {scheme} ({scheme_type.value})")

        if scheme_type == Scheme.BASIC:
            result.basic = decode_basic(credentials)
            return result.basic.username

        if scheme_type == Scheme.SIGNATURE:
            result.signature = decode_signature(request, self.options, self.signature_parser)
            return result.signature.key_id

        return ANONYMOUS

    def parse_header(self, authorization: str | None) -> tuple[AuthorizationResult, str | None]:
        return self.parse(AuthorizationRequest.from_header(authorization))

    def handle(self, request: AuthorizationRequest, response, call_next: NextCallback):
        """
        Pipeline step: populate ``request.authorization`` and ``request.username``.

        ``call_next`` is called exactly once, with the error when the header is invalid.
        """
        request.authorization = AuthorizationResult()
        request.username = ANONYMOUS
        try:
            request.username = self.populate(request, request.authorization)
        except InvalidHeaderError as e:
            return call_next(e)
        return call_next()

import logging
import re
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from dynaconf.utils.boxing import DynaBox

from authparse.constants import DEFAULT_CLOCK_SKEW, SCHEME_SIGNATURE
from authparse.errors import (
    ExpiredRequestError,
    InvalidParamsError,
    MissingHeaderError,
    StrictParsingError,
)
from authparse.models import ParsedSignature
from authparse.request import AuthorizationRequest
from authparse.signature.base import BaseSignatureParser
from authparse.signature.registry import register_signature_parser

logger = logging.getLogger("authparse.signature")

RE_PARAM = re.compile(r'\s*([A-Za-z]+)\s*=\s*"([^"]*)"\s*(?:,|$)')

REQUIRED_PARAMS = ("keyId", "signature", "algorithm")


def parse_params(value: str) -> dict[str, str]:
    params: dict[str, str] = {}
    position = 0
    while position < len(value):
        match = RE_PARAM.match(value, position)
        if not match:
            raise InvalidParamsError("bad param format")
        params[match.group(1)] = match.group(2)
        position = match.end()
    return params


@register_signature_parser("http-signature")
class HTTPSignatureParser(BaseSignatureParser):
    """
    Parser for the ``Signature`` scheme of the HTTP signatures draft.

    It extracts the signature parameters and rebuilds the signing string
    out of the signed headers. Signatures are not verified.
    """

    def parse(self, request: AuthorizationRequest, options: DynaBox) -> ParsedSignature:
        authorization = request.authorization_header
        if not authorization:
            raise MissingHeaderError("no authorization header present in the request")

        scheme, _, value = authorization.partition(" ")
        if scheme.lower() != SCHEME_SIGNATURE.lower():
            raise InvalidParamsError(f'scheme was not "{SCHEME_SIGNATURE}"')

        params = parse_params(value.strip())
        for name in REQUIRED_PARAMS:
            if not params.get(name):
                raise InvalidParamsError(f"{name} was not specified")

        algorithm = params["algorithm"].lower()
        if algorithm not in options.get("algorithms", []):
            raise InvalidParamsError(f"{params['algorithm']} is not a supported algorithm")

        default_header = "x-date" if "x-date" in request.headers else "date"
        signed_headers = params.get("headers", default_header).lower().split()

        signing_string = self.build_signing_string(
            request, signed_headers, strict=bool(options.get("strict", False))
        )
        self.check_clock_skew(request, options.get("clock_skew", DEFAULT_CLOCK_SKEW))

        for required in options.get("headers", []) or []:
            if required.lower() not in signed_headers:
                raise MissingHeaderError(f"{required} was not a signed header")

        logger.debug(f"Parsed signature for key {params['keyId']} ({algorithm})")
        return ParsedSignature(
            scheme=scheme,
            params={**params, "headers": signed_headers},
            signing_string=signing_string,
            algorithm=algorithm.upper(),
            key_id=params["keyId"],
        )

    def build_signing_string(
        self, request: AuthorizationRequest, signed_headers: list[str], strict: bool = False
    ) -> str:
        lines = []
        for name in signed_headers:
            if name == "request-line":
                if strict:
                    raise StrictParsingError(
                        "request-line is not a valid header with strict parsing enabled."
                    )
                lines.append(
                    f"{request.method.upper()} {request.target} HTTP/{request.http_version}"
                )
            elif name == "(request-target)":
                lines.append(f"(request-target): {request.method.lower()} {request.target}")
            else:
                value = request.headers.get(name)
                if value is None:
                    raise MissingHeaderError(f"{name} was not in the request")
                lines.append(f"{name}: {value}")
        return "\n".join(lines)

    def check_clock_skew(self, request: AuthorizationRequest, clock_skew: int) -> None:
        raw_date = request.headers.get("x-date") or request.headers.get("date")
        if not raw_date:
            return
        try:
            date = parsedate_to_datetime(raw_date)
        except (TypeError, ValueError):
            raise InvalidParamsError(f"{raw_date} is not a valid date")
        if date.tzinfo is None:
            date = date.replace(tzinfo=UTC)
        skew = abs((datetime.now(UTC) - date).total_seconds())
        if skew > clock_skew:
            raise ExpiredRequestError(f"clock skew of {skew:.0f}s was greater than {clock_skew}s")

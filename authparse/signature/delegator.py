import logging

from dynaconf.utils.boxing import DynaBox

from authparse.constants import SIGNATURE_ALGORITHMS
from authparse.errors import InvalidHeaderError
from authparse.models import ParsedSignature
from authparse.request import AuthorizationRequest
from authparse.signature.base import BaseSignatureParser

logger = logging.getLogger("authparse.signature")


def decode_signature(
    request: AuthorizationRequest,
    options: DynaBox | None,
    parser: BaseSignatureParser,
) -> ParsedSignature:
    effective_options = DynaBox(dict(options or {}))
    effective_options["algorithms"] = list(SIGNATURE_ALGORITHMS)

    try:
        return parser.parse(request, effective_options)
    except Exception as e:
        logger.warning(f"Rejected signature authorization: {e}")
        raise InvalidHeaderError(f"Authorization header invalid: {e}")

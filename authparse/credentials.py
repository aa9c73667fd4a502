import base64
import binascii
import logging

from authparse.constants import SCHEME_BASIC
from authparse.errors import InvalidHeaderError
from authparse.models import BasicCredentials

logger = logging.getLogger("authparse")


def split_authorization_header(authorization_header: str) -> tuple[str, str]:
    """
    Split an authorization header into its scheme and credentials.

    A header made of a single token is taken as the credentials of an
    implicit Basic scheme.

    :param authorization_header: the non-empty 'Scheme credentials' string
    :return: the (scheme, credentials) pair, both verbatim
    """
    scheme, separator, credentials = authorization_header.partition(" ")
    if not separator:
        return SCHEME_BASIC, scheme
    if not scheme or not credentials:
        raise InvalidHeaderError("header content is invalid")
    return scheme, credentials


def _b64decode(token: str) -> str:
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.b64decode(padded.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        logger.debug(f"Cannot decode basic credentials: {e}")
        raise InvalidHeaderError()


def decode_basic(token: str) -> BasicCredentials:
    """
    Decode the base64 'user:pass' token of a Basic authorization header.

    Missing or empty username and password are returned as None.
    """
    decoded = _b64decode(token)
    if not decoded:
        raise InvalidHeaderError()

    username, _, password = decoded.partition(":")
    return BasicCredentials(username=username or None, password=password or None)

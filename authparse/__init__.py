from importlib.metadata import PackageNotFoundError, version

from authparse.errors import AuthorizationError, InvalidHeaderError
from authparse.models import AuthorizationResult, BasicCredentials, ParsedSignature, Scheme
from authparse.parser import AuthorizationParser
from authparse.request import AuthorizationRequest

try:
    __version__ = version("authparse")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0.dev0"

__all__ = [
    "AuthorizationError",
    "AuthorizationParser",
    "AuthorizationRequest",
    "AuthorizationResult",
    "BasicCredentials",
    "InvalidHeaderError",
    "ParsedSignature",
    "Scheme",
]

from authparse.signature.base import BaseSignatureParser
from authparse.signature.delegator import decode_signature
from authparse.signature.http_signature import HTTPSignatureParser
from authparse.signature.registry import get_signature_parser, register_signature_parser

__all__ = [
    "BaseSignatureParser",
    "HTTPSignatureParser",
    "decode_signature",
    "get_signature_parser",
    "register_signature_parser",
]

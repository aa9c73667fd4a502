from abc import ABC, abstractmethod

from dynaconf.utils.boxing import DynaBox

from authparse.models import ParsedSignature
from authparse.request import AuthorizationRequest


class BaseSignatureParser(ABC):
    """
    Parser for the Signature authorization scheme.

    Implementations raise a ``SignatureError`` (or any other exception)
    carrying a human-readable message when the request cannot be parsed.
    """

    @abstractmethod
    def parse(self, request: AuthorizationRequest, options: DynaBox) -> ParsedSignature:
        """
        Parse the signature carried by the request.

        :param request: the inbound request.
        :param options: parser options, ``algorithms`` lists the accepted algorithms.
        :return: the parsed signature.
        """
        raise NotImplementedError()

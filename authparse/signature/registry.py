from authparse.signature.base import BaseSignatureParser

PARSER_REGISTRY: dict[str, type[BaseSignatureParser]] = {}


def register_signature_parser(name: str):
    """Decorator to register a signature parser class with a unique key."""

    def decorator(cls: type[BaseSignatureParser]):
        PARSER_REGISTRY[name] = cls
        return cls

    return decorator


def get_signature_parser(name: str) -> type[BaseSignatureParser] | None:
    return PARSER_REGISTRY.get(name)

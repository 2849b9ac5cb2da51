from .builder import RemoteSetBuilder
from .document_builder import DocumentBuilder

__all__ = [
    "DocumentBuilder",
    "RemoteSetBuilder",
]

"""ead3: typed object model and XML codec for EAD3 finding aids."""

__version__ = "0.1.0"

import logging
from typing import Optional

from .archdesc import ArchDesc
from .components import C, C01, C02, C03, C04, Dsc
from .control import Control
from .decoder import Decoder, decode
from .did import DID
from .document import EAD3_NAMESPACE, Document, new
from .encoder import Encoder, encode
from .exceptions import EAD3Error, EncodeInvariantError, MalformedInputError, SchemaMismatchError, UnknownElementWarning

logger = logging.getLogger(__name__)


def load(path: str, parser=None, encoding_override: Optional[str] = None) -> Document:
    """Facade for loading an EAD3 document from a file."""
    with open(path, "rb") as f:
        raw = f.read()
    document = Decoder(parser=parser, encoding_override=encoding_override).decode(raw)
    logger.info("Loaded %s", path)
    return document


def save(document: Document, path: str, **options) -> None:
    """Encode `document` and write it to `path`; `options` go to the `Encoder`."""
    data = encode(document, **options)
    with open(path, "wb") as f:
        f.write(data)
    logger.info("Saved %s", path)


__all__ = [
    "ArchDesc",
    "C",
    "C01",
    "C02",
    "C03",
    "C04",
    "Control",
    "DID",
    "Decoder",
    "Document",
    "Dsc",
    "EAD3Error",
    "EAD3_NAMESPACE",
    "EncodeInvariantError",
    "Encoder",
    "MalformedInputError",
    "SchemaMismatchError",
    "UnknownElementWarning",
    "decode",
    "encode",
    "load",
    "new",
    "save",
]

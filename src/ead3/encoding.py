import codecs
import re
from typing import Optional

from .exceptions import MalformedInputError

_DECLARATION = re.compile(rb"^\s*<\?xml[^>]*\?>")


# codec name -> name written in the XML declaration
_DECLARED_NAMES = {
    "utf-8": "UTF-8",
    "utf-8-sig": "UTF-8",
    "utf-16": "UTF-16",
    "utf-16-be": "UTF-16BE",
    "utf-16-le": "UTF-16LE",
    "ascii": "US-ASCII",
    "iso8859-1": "ISO-8859-1",
    "iso8859-15": "ISO-8859-15",
    "cp1252": "windows-1252",
}


def canonical_encoding(name: str) -> str:
    """
    Name of the encoding `name` as written in an XML declaration, e.g.
    'latin1' -> 'ISO-8859-1'. Raises LookupError for an unknown encoding.
    """
    if not name or not name.strip():
        raise ValueError("Encoding name is empty.")
    codec = codecs.lookup(name.strip()).name
    return _DECLARED_NAMES.get(codec, codec.upper())


def as_utf8(data, encoding_override: Optional[str] = None) -> bytes:
    """
    Re-encode `data` as UTF-8 bytes whose XML declaration, if any, says so.

    `data` is a str, or bytes decoded with `encoding_override`. lxml refuses
    str input carrying an encoding declaration, and must not trust the
    declaration once the override is applied.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8")
    else:
        try:
            raw = data.decode(encoding_override).encode("utf-8")
        except LookupError as exc:
            raise MalformedInputError(f"Unknown encoding: {encoding_override}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"Input is not valid {encoding_override}: {exc}") from exc
    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8):]
    return _DECLARATION.sub(b'<?xml version="1.0" encoding="UTF-8"?>', raw, count=1)

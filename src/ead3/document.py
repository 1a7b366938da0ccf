from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from .archdesc import ArchDesc
from .control import Control
from .node import Attribute, Mandatory, Node

EAD3_NAMESPACE = "http://ead3.archivists.org/schema/undeprecated/"


class Document(Node):
    """
    Root of an EAD3 finding aid (<ead>).

    `xmlns` is the default namespace of the root element, None for an
    un-namespaced document. `namespaces` holds the prefixed declarations of
    the root (xsi, xlink ...), which are written back on the root only.
    """
    tag = "ead"
    relatedencoding: Attribute = None
    dateencoding: Attribute = None
    langencoding: Attribute = None
    countryencoding: Attribute = None
    repositoryencoding: Attribute = None
    scriptencoding: Attribute = None
    base: Attribute = None

    xmlns: Optional[str] = Field(default=None, exclude=True)
    namespaces: Dict[str, str] = Field(default={}, exclude=True)

    control: Mandatory[Control] = None
    archdesc: Mandatory[ArchDesc] = None

    @classmethod
    def new(cls) -> "Document":
        """Empty document in the EAD3 namespace, to be filled by the caller."""
        return cls(xmlns=EAD3_NAMESPACE)


def new() -> Document:
    return Document.new()

"""
EAD3 document -> object tree.

The decoder parses with lxml, strips the default EAD namespace and walks the
tree once from the root, dispatching every child element on its tag through
the `NodeSpec` of the parent type.
"""

from __future__ import annotations

import copy
import logging
import warnings
from typing import Any, Dict, List, Optional, Union
from xml.sax.saxutils import escape

from lxml import etree

from .document import Document
from .encoding import as_utf8
from .exceptions import MalformedInputError, SchemaMismatchError, UnknownElementWarning
from .node import Node, describe

logger = logging.getLogger(__name__)


def _default_parser() -> etree.XMLParser:
    return etree.XMLParser(remove_blank_text=False, resolve_entities=False)


class _Walk:
    """
    State of one decode call: the required parts found missing so far and
    the entities declared in the internal DTD subset.
    """

    def __init__(self, entities: Optional[Dict[str, str]] = None):
        self.missing: List[str] = []
        self.entities = entities or {}

    def node(self, element: etree._Element, node_type: type, path: str) -> Node:
        spec = describe(node_type)
        values: Dict[str, Any] = {}
        sequence: List[str] = []

        attrib = dict(element.attrib)
        for slot in spec.attributes:
            value = attrib.pop(slot.name, None)
            if value is not None:
                values[slot.field] = value
            elif slot.required:
                self.missing.append(f"{path}/@{slot.name}")
        if attrib and spec.extra:
            values[spec.extra] = attrib

        if spec.markup:
            markup = self.markup(element, path)
            if markup:
                values[spec.markup] = markup
        else:
            text = self.children(element, spec, values, sequence, path)
            if spec.text and text:
                if spec.children:
                    # mixed content: indentation between children is not text
                    if text.strip():
                        values[spec.text] = text
                else:
                    values[spec.text] = text

        for slot in spec.required_children:
            if slot.field not in values:
                tag = next(iter(slot.types))
                self.missing.append(f"{path}/{tag}")

        node = node_type(**values)
        node._sequence = tuple(sequence)
        return node

    def children(self, element, spec, values, sequence, path) -> str:
        """Decode child elements into `values`; return the direct character data."""
        text = [element.text or ""]
        for child in element:
            if isinstance(child, etree._Entity):
                text.append(self.entity(child, path))
            elif isinstance(child.tag, str):
                self.child(child, spec, values, sequence, path)
            text.append(child.tail or "")
        return "".join(text)

    def child(self, child, spec, values, sequence, path) -> None:
        slot = spec.dispatch.get(child.tag)
        if slot is None:
            self.unknown(f"Skipped unknown element <{child.tag}> in {path}")
            return
        child_path = f"{path}/{child.tag}"
        if not slot.many and slot.field in values:
            self.unknown(f"Skipped repeated element <{child.tag}> in {path}")
            return
        node = self.node(child, slot.types[child.tag], child_path)
        if slot.many:
            values.setdefault(slot.field, []).append(node)
        else:
            values[slot.field] = node
        sequence.append(slot.field)

    def markup(self, element, path) -> str:
        element = copy.deepcopy(element)
        self.inline(element, path)
        # drop the namespace declarations inherited from the document
        etree.cleanup_namespaces(element)
        parts = [escape(element.text or "")]
        for child in element:
            parts.append(etree.tostring(child, encoding="unicode", with_tail=False))
            parts.append(escape(child.tail or ""))
        return "".join(parts)

    def inline(self, element, path) -> None:
        """Replace the entity references under `element` by their text."""
        for reference in list(element.iter(etree.Entity)):
            text = self.entity(reference, path) + (reference.tail or "")
            parent = reference.getparent()
            previous = reference.getprevious()
            if previous is not None:
                previous.tail = (previous.tail or "") + text
            else:
                parent.text = (parent.text or "") + text
            parent.remove(reference)

    def entity(self, reference, path) -> str:
        """Replacement text of an entity reference left unresolved by the parser."""
        name = reference.name
        if name in self.entities:
            return self.entities[name]
        raise MalformedInputError(f"Entity &{name}; in {path} is not declared in the document", reference.sourceline)

    @staticmethod
    def unknown(message: str) -> None:
        logger.debug(message)
        warnings.warn(message, UnknownElementWarning, stacklevel=2)


class Decoder:
    """
    Decode EAD3 documents into `Document` trees.

    :param parser: lxml parser to use; a fresh non-validating parser per call by default.
    :param encoding_override: decode input bytes with this encoding instead of
        the one declared in the document.
    """

    def __init__(self, parser: Optional[etree.XMLParser] = None, encoding_override: Optional[str] = None):
        self.parser = parser
        self.encoding_override = encoding_override

    def decode(self, data: Union[bytes, str]) -> Document:
        root = self.parse(data)
        namespace = etree.QName(root).namespace
        prefixed = {prefix: uri for prefix, uri in root.nsmap.items() if prefix is not None}
        if namespace:
            _strip_namespace(root, namespace)

        if root.tag != "ead":
            raise SchemaMismatchError(["ead"], f"Root element is <{root.tag}>, expected <ead>")

        walk = _Walk(_declared_entities(root))
        document = walk.node(root, Document, "ead")
        if walk.missing:
            raise SchemaMismatchError(walk.missing)

        document.xmlns = namespace
        document.namespaces = prefixed
        logger.debug("Decoded EAD3 document %s", document.control.recordid.value)
        return document

    def parse(self, data: Union[bytes, str]) -> etree._Element:
        if not isinstance(data, (bytes, str)):
            raise TypeError(f"Expected bytes or str, got {type(data).__name__}")
        if isinstance(data, str) or self.encoding_override:
            data = as_utf8(data, self.encoding_override)
        parser = self.parser if self.parser is not None else _default_parser()
        try:
            return etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            raise MalformedInputError(f"Input is not well-formed XML: {exc}", exc.lineno, exc.offset) from exc


def _declared_entities(root: etree._Element) -> Dict[str, str]:
    dtd = root.getroottree().docinfo.internalDTD
    if dtd is None:
        return {}
    return {entity.name: entity.content or "" for entity in dtd.iterentities()}


def _strip_namespace(root: etree._Element, namespace: str) -> None:
    prefix = "{%s}" % namespace
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith(prefix):
            element.tag = element.tag[len(prefix):]
    etree.cleanup_namespaces(root)


def decode(data: Union[bytes, str], **options) -> Document:
    """Decode `data` with a `Decoder` built from `options`."""
    return Decoder(**options).decode(data)

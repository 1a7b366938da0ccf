"""
Object tree -> EAD3 document.

Children of a decoded node are written in the order they were read. Children
of a node built in code follow the declaration order of its type, which is
the element order of the EAD3 schema; choice lists keep their own order.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional
from xml.sax.saxutils import quoteattr

from lxml import etree

from .document import Document
from .encoding import canonical_encoding
from .exceptions import EncodeInvariantError
from .node import Node, describe

logger = logging.getLogger(__name__)


def _qname(namespace: Optional[str], tag: str) -> str:
    return etree.QName(namespace, tag).text if namespace else tag


class Encoder:
    """
    Encode `Document` trees as EAD3 XML.

    :param encoding: output encoding; characters it cannot represent are
        written as character references.
    :param pretty_print: indent structural elements. The inside of text
        elements is never touched, so the output decodes to the same tree.
    :param xml_declaration: write the <?xml ...?> line.
    :param indent: one indentation level.
    """

    def __init__(self, encoding: str = "UTF-8", pretty_print: bool = True, xml_declaration: bool = True, indent: str = "  "):
        self.encoding = canonical_encoding(encoding)
        self.pretty_print = pretty_print
        self.xml_declaration = xml_declaration
        self.indent = indent

    def to_element(self, document: Document) -> etree._Element:
        if not isinstance(document, Document):
            raise EncodeInvariantError(f"Expected a Document, got {type(document).__name__}")
        namespace = document.xmlns
        nsmap = dict(document.namespaces)
        if namespace:
            nsmap[None] = namespace
        try:
            root = etree.Element(_qname(namespace, Document.tag), nsmap=nsmap)
        except ValueError as exc:
            raise EncodeInvariantError(f"Invalid namespace declaration: {exc}", "ead") from exc
        self._fill(root, document, "ead", namespace, 0)
        return root

    def encode(self, document: Document) -> bytes:
        root = self.to_element(document)
        xml_text = etree.tostring(root, encoding="unicode", with_tail=False)

        parts = []
        if self.xml_declaration:
            parts.append(f'<?xml version="1.0" encoding="{self.encoding}"?>')
        parts.append(xml_text)
        final_text = "\n".join(parts) + "\n"
        logger.debug("Encoded EAD3 document as %s", self.encoding)
        return final_text.encode(self.encoding, errors="xmlcharrefreplace")

    def _fill(self, element: etree._Element, node: Node, path: str, namespace: Optional[str], depth: int) -> None:
        spec = describe(type(node))

        for slot in spec.attributes:
            value = getattr(node, slot.field)
            if value is None:
                if slot.required:
                    raise EncodeInvariantError(f"required attribute '{slot.name}' is not set", path)
                continue
            self._set(element, slot.name, value, path)
        if spec.extra:
            for name, value in getattr(node, spec.extra).items():
                self._set(element, name, value, path)

        if spec.markup:
            self._splice(element, getattr(node, spec.markup), path, namespace)
            return

        text = getattr(node, spec.text) if spec.text else None
        if text is not None:
            if not isinstance(text, str):
                raise EncodeInvariantError(f"text must be a string, got {type(text).__name__}", path)
            try:
                element.text = text
            except ValueError as exc:
                raise EncodeInvariantError(str(exc), path) from exc

        for slot, item in _in_order(spec, node, path):
            item_tag = getattr(type(item), "tag", None)
            if slot.types.get(item_tag) is not type(item):
                raise EncodeInvariantError(f"'{slot.field}' cannot hold {type(item).__name__}", path)
            child = etree.SubElement(element, _qname(namespace, item_tag))
            self._fill(child, item, f"{path}/{item_tag}", namespace, depth + 1)

        if self.pretty_print and text is None and len(element):
            self._indent(element, depth)

    def _indent(self, element: etree._Element, depth: int) -> None:
        inner = "\n" + self.indent * (depth + 1)
        element.text = inner
        for child in element:
            child.tail = inner
        child.tail = "\n" + self.indent * depth

    @staticmethod
    def _set(element, name, value, path) -> None:
        if not isinstance(value, str):
            raise EncodeInvariantError(f"attribute '{name}' must be a string, got {type(value).__name__}", path)
        try:
            element.set(name, value)
        except ValueError as exc:
            raise EncodeInvariantError(f"cannot write attribute '{name}': {exc}", path) from exc

    @staticmethod
    def _splice(element, markup, path, namespace) -> None:
        """Parse a markup value as a fragment of the document and move it into `element`."""
        if markup is None:
            return
        if not isinstance(markup, str):
            raise EncodeInvariantError(f"markup must be a string, got {type(markup).__name__}", path)
        declaration = f" xmlns={quoteattr(namespace)}" if namespace else ""
        parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
        try:
            wrapper = etree.fromstring(f"<fragment{declaration}>{markup}</fragment>", parser)
        except etree.XMLSyntaxError as exc:
            raise EncodeInvariantError(f"markup is not well-formed XML: {exc}", path) from exc
        element.text = wrapper.text
        for child in list(wrapper):
            element.append(child)


def _in_order(spec, node, path):
    """
    (slot, item) pairs of the children of `node`, in output order.

    Children are replayed in the order recorded at decode time. Items added
    since then follow the last recorded sibling of their field; fields with
    no recorded child go to their schema position, before the first recorded
    child declared after them.
    """
    queues = {}
    for slot in spec.children:
        value = getattr(node, slot.field)
        if slot.many:
            items = list(value)
        else:
            items = [] if value is None else [value]
        if not items and slot.required:
            tag = next(iter(slot.types))
            raise EncodeInvariantError(f"required element <{tag}> is not set", path)
        queues[slot.field] = items

    slots = {slot.field: slot for slot in spec.children}
    rank = {slot.field: index for index, slot in enumerate(spec.children)}
    sequence = [field for field in node._sequence if field in slots]
    left = Counter(sequence)
    pending = [slot for slot in spec.children if slot.field not in left]

    for field in sequence:
        while pending and rank[pending[0].field] < rank[field]:
            slot = pending.pop(0)
            for item in queues[slot.field]:
                yield slot, item
        left[field] -= 1
        queue = queues[field]
        if left[field]:
            if queue:
                yield slots[field], queue.pop(0)
        else:
            for item in queue:
                yield slots[field], item
            queue.clear()
    for slot in pending:
        for item in queues[slot.field]:
            yield slot, item


def encode(document: Document, **options) -> bytes:
    """Encode `document` with an `Encoder` built from `options`."""
    return Encoder(**options).encode(document)

"""
Schema primitives shared by every EAD3 element type.

An element type is a pydantic model whose fields carry one marker in their
``Annotated`` metadata:

- ``Attr``            an XML attribute (name defaults to the field name)
- ``Text``            plain character data of the element
- ``Markup``          the raw inner markup of the element, kept as a fragment
- ``Child``           one or more child elements; the accepted element types
                      are read from the field annotation
- ``ExtraAttributes`` every attribute the type does not declare

``describe()`` turns those declarations into a ``NodeSpec`` which the decoder
and the encoder both walk. The field order of a model is the element order
of the schema; a decoded node also remembers the order its children came in.
"""

from __future__ import annotations

import functools
import types
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Dict, Mapping, Optional, Tuple, TypeVar, Union, get_args, get_origin

from pydantic import AliasGenerator, BaseModel, ConfigDict, PrivateAttr


class Attr:
    __slots__ = ("name", "required")

    def __init__(self, name: Optional[str] = None, required: bool = False):
        self.name = name
        self.required = required

    def __repr__(self) -> str:
        return f"Attr(name={self.name!r}, required={self.required})"


class Text:
    def __repr__(self) -> str:
        return "Text()"


class Markup:
    def __repr__(self) -> str:
        return "Markup()"


class Child:
    __slots__ = ("required",)

    def __init__(self, required: bool = False):
        self.required = required

    def __repr__(self) -> str:
        return f"Child(required={self.required})"


class ExtraAttributes:
    def __repr__(self) -> str:
        return "ExtraAttributes()"


T = TypeVar("T")

Attribute = Annotated[Optional[str], Attr()]
RequiredAttribute = Annotated[Optional[str], Attr(required=True)]
TextValue = Annotated[Optional[str], Text()]
MarkupValue = Annotated[Optional[str], Markup()]

# Child slots: 0..1, exactly one, 0..n
One = Annotated[Optional[T], Child()]
Mandatory = Annotated[Optional[T], Child(required=True)]
Many = Annotated[list[T], Child()]


# JSON names of the fields whose name is not already the JSON key
JSON_NAMES = {
    "accessrestrict": "access_restrict",
    "agencycode": "agency_code",
    "agencyname": "agency_name",
    "agenttype": "agent_type",
    "controlaccess": "control_access",
    "conventiondeclaration": "convention_declaration",
    "corpname": "corp_name",
    "custodhist": "custod_hist",
    "didnote": "did_note",
    "editionstmt": "edition_stmt",
    "encodinganalog": "encoding_analog",
    "eventdatetime": "event_datetime",
    "eventtype": "event_type",
    "famname": "fam_name",
    "filedesc": "file_desc",
    "fromdate": "from_date",
    "langcode": "lang_code",
    "langmaterial": "lang_material",
    "languagedeclaration": "language_declaration",
    "localtype": "local_type",
    "maintenanceagency": "maintenance_agency",
    "maintenanceevent": "maintenance_event",
    "maintenancehistory": "maintenance_history",
    "maintenancestatus": "maintenance_status",
    "originalsloc": "originals_loc",
    "otherfindaid": "other_find_aid",
    "otherrecordid": "other_record_id",
    "persname": "pers_name",
    "physdesc": "phys_desc",
    "physdescset": "phys_desc_set",
    "physdescstructured": "phys_desc_structured",
    "physloc": "phys_loc",
    "phystech": "phys_tech",
    "prefercite": "prefer_cite",
    "publicationstmt": "publication_stmt",
    "recordid": "record_id",
    "relatedmaterial": "related_material",
    "scriptcode": "script_code",
    "titleproper": "title_proper",
    "titlestmt": "title_stmt",
    "todate": "to_date",
    "unitdate": "unit_dates",
    "unitdatestructured": "unit_date_structured",
    "unitdatetype": "unit_date_type",
    "unitid": "unit_id",
    "unittitle": "unit_title",
    "userestrict": "use_restrict",
}


def json_name(field: str) -> str:
    return JSON_NAMES.get(field, field)


class Node(BaseModel):
    """
    Base of every EAD3 element type. Carries the attributes common to all
    EAD3 elements and keeps undeclared attributes in `other_attributes`.

    A decoded node records the fields of its children in document order, so
    that siblings the schema lets appear in any order are written back as
    they came. Equality compares field values only.
    """
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        alias_generator=AliasGenerator(serialization_alias=json_name),
    )

    tag: ClassVar[str] = ""

    id: Attribute = None
    altrender: Attribute = None
    audience: Attribute = None
    other_attributes: Annotated[Dict[str, str], ExtraAttributes()] = {}

    _sequence: Tuple[str, ...] = PrivateAttr(default=())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view of the subtree: unset attributes and empty children left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_defaults=True, indent=indent)


class PlainText(Node):
    """Attribute-leaf: attributes plus unescaped character data."""
    value: TextValue = None

    def __str__(self) -> str:
        return self.value or ""


class FormattedText(Node):
    """
    Free-text leaf: attributes plus the inner markup kept verbatim, e.g.
    'Letters from <persname><part>Ada</part></persname>, 1843'.
    """
    value: MarkupValue = None

    def __str__(self) -> str:
        return self.value or ""


@dataclass(frozen=True)
class AttributeSlot:
    field: str
    name: str
    required: bool = False


@dataclass(frozen=True)
class ChildSlot:
    field: str
    types: Mapping[str, type]  # tag -> node type
    many: bool
    required: bool = False

    @property
    def classes(self) -> Tuple[type, ...]:
        return tuple(self.types.values())


@dataclass(frozen=True)
class NodeSpec:
    """Immutable schema metadata of a node type, in declaration order."""
    node_type: type
    tag: str
    attributes: Tuple[AttributeSlot, ...]
    children: Tuple[ChildSlot, ...]
    dispatch: Mapping[str, ChildSlot]
    text: Optional[str] = None
    markup: Optional[str] = None
    extra: Optional[str] = None

    @property
    def structural(self) -> bool:
        return self.text is None and self.markup is None

    @property
    def required_attributes(self) -> Tuple[AttributeSlot, ...]:
        return tuple(a for a in self.attributes if a.required)

    @property
    def required_children(self) -> Tuple[ChildSlot, ...]:
        return tuple(c for c in self.children if c.required)


def _marker(metadata) -> object:
    for item in metadata:
        if isinstance(item, (Attr, Text, Markup, Child, ExtraAttributes)):
            return item
    return None


def _union_members(annotation) -> Tuple[object, ...]:
    if get_origin(annotation) in (Union, types.UnionType):
        return tuple(a for a in get_args(annotation) if a is not type(None))
    return (annotation,)


def _child_types(owner: type, field: str, annotation) -> Tuple[bool, Dict[str, type]]:
    many = get_origin(annotation) is list
    if many:
        (annotation,) = get_args(annotation)
    found: Dict[str, type] = {}
    for member in _union_members(annotation):
        if not (isinstance(member, type) and issubclass(member, Node) and member.tag):
            raise TypeError(f"{owner.__name__}.{field}: {member!r} is not an EAD3 element type")
        found[member.tag] = member
    return many, found


@functools.lru_cache(maxsize=None)
def describe(node_type: type) -> NodeSpec:
    if not node_type.__pydantic_complete__:
        node_type.model_rebuild()

    attributes = []
    children = []
    dispatch: Dict[str, ChildSlot] = {}
    text = markup = extra = None

    for name, info in node_type.model_fields.items():
        marker = _marker(info.metadata)
        if isinstance(marker, Attr):
            attributes.append(AttributeSlot(name, marker.name or name, marker.required))
        elif isinstance(marker, Text):
            text = name
        elif isinstance(marker, Markup):
            markup = name
        elif isinstance(marker, ExtraAttributes):
            extra = name
        elif isinstance(marker, Child):
            many, found = _child_types(node_type, name, info.annotation)
            slot = ChildSlot(name, types.MappingProxyType(found), many, marker.required)
            for tag in found:
                if tag in dispatch:
                    raise TypeError(
                        f"{node_type.__name__}: <{tag}> is claimed by both "
                        f"'{dispatch[tag].field}' and '{name}'"
                    )
                dispatch[tag] = slot
            children.append(slot)

    return NodeSpec(
        node_type=node_type,
        tag=node_type.tag,
        attributes=tuple(attributes),
        children=tuple(children),
        dispatch=types.MappingProxyType(dispatch),
        text=text,
        markup=markup,
        extra=extra,
    )

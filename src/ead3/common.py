"""
Element types shared by several parts of an EAD3 document: paragraphs and
other blocks, headings, dates, names and controlled access terms, languages,
citations and notes.

Organized from the smallest elements to the largest ones.
"""

from __future__ import annotations

from typing import Union

from .node import Attribute, FormattedText, Many, Node, One, PlainText


# --- Formatted blocks ---

class P(FormattedText):
    """Paragraph."""
    tag = "p"
    localtype: Attribute = None


class Head(FormattedText):
    tag = "head"
    althead: Attribute = None
    localtype: Attribute = None


class List(FormattedText):
    """List, kept as raw markup (listhead, item, defitem ...)."""
    tag = "list"
    listtype: Attribute = None
    mark: Attribute = None
    numeration: Attribute = None
    localtype: Attribute = None


class Table(FormattedText):
    tag = "table"
    frame: Attribute = None
    colsep: Attribute = None
    rowsep: Attribute = None
    pgwide: Attribute = None
    localtype: Attribute = None


class BlockQuote(FormattedText):
    tag = "blockquote"
    localtype: Attribute = None


class ArchRef(FormattedText):
    """Reference to archival material described elsewhere."""
    tag = "archref"
    localtype: Attribute = None


class BibRef(FormattedText):
    tag = "bibref"
    href: Attribute = None
    linktitle: Attribute = None
    show: Attribute = None
    actuate: Attribute = None
    linkrole: Attribute = None
    arcrole: Attribute = None
    lastdatetimeverified: Attribute = None
    localtype: Attribute = None


class Event(FormattedText):
    tag = "event"
    localtype: Attribute = None


class Citation(FormattedText):
    tag = "citation"
    href: Attribute = None
    linktitle: Attribute = None
    show: Attribute = None
    actuate: Attribute = None
    linkrole: Attribute = None
    arcrole: Attribute = None
    lastdatetimeverified: Attribute = None
    localtype: Attribute = None


class ObjectXMLWrap(FormattedText):
    """Foreign XML embedded as is."""
    tag = "objectxmlwrap"


class Num(FormattedText):
    tag = "num"
    localtype: Attribute = None
    encodinganalog: Attribute = None


class AddressLine(FormattedText):
    tag = "addressline"
    localtype: Attribute = None


class Address(Node):
    tag = "address"
    addressline: Many[AddressLine] = []


# --- Dates ---

class Date(PlainText):
    tag = "date"
    normal: Attribute = None
    standarddate: Attribute = None
    calendar: Attribute = None
    era: Attribute = None
    certainty: Attribute = None
    notbefore: Attribute = None
    notafter: Attribute = None
    localtype: Attribute = None
    encodinganalog: Attribute = None


class _DatePoint(PlainText):
    standarddate: Attribute = None
    notbefore: Attribute = None
    notafter: Attribute = None
    certainty: Attribute = None
    localtype: Attribute = None


class DateSingle(_DatePoint):
    tag = "datesingle"


class FromDate(_DatePoint):
    tag = "fromdate"


class ToDate(_DatePoint):
    tag = "todate"


class DateRange(Node):
    """Structured date range: an explicit from/to pair."""
    tag = "daterange"
    localtype: Attribute = None
    fromdate: One[FromDate] = None
    todate: One[ToDate] = None


class DateSet(Node):
    tag = "dateset"
    localtype: Attribute = None
    dates: Many[Union[DateSingle, DateRange]] = []


# --- Chronologies ---

class ChronItemSet(Node):
    tag = "chronitemset"
    event: Many[Event] = []


class ChronItem(Node):
    tag = "chronitem"
    localtype: Attribute = None
    datesingle: One[DateSingle] = None
    daterange: One[DateRange] = None
    dateset: One[DateSet] = None
    event: One[Event] = None
    chronitemset: One[ChronItemSet] = None


class ChronList(Node):
    tag = "chronlist"
    localtype: Attribute = None
    head: One[Head] = None
    chronitem: Many[ChronItem] = []


# Block-level content of narrative sections, kept in document order
Block = Union[P, List, ChronList, Table, BlockQuote, ArchRef, BibRef]


class DescriptiveNote(Node):
    tag = "descriptivenote"
    localtype: Attribute = None
    encodinganalog: Attribute = None
    p: Many[P] = []


# --- Names and controlled access terms ---

class Part(PlainText):
    tag = "part"
    localtype: Attribute = None
    rules: Attribute = None
    source: Attribute = None
    identifier: Attribute = None


class _AccessTerm(Node):
    localtype: Attribute = None
    encodinganalog: Attribute = None
    identifier: Attribute = None
    normal: Attribute = None
    relator: Attribute = None
    rules: Attribute = None
    source: Attribute = None
    part: Many[Part] = []


class PersName(_AccessTerm):
    tag = "persname"


class FamName(_AccessTerm):
    tag = "famname"


class CorpName(_AccessTerm):
    tag = "corpname"


class Name(_AccessTerm):
    tag = "name"


class Subject(_AccessTerm):
    tag = "subject"


class GenreForm(_AccessTerm):
    tag = "genreform"


class GeogName(_AccessTerm):
    tag = "geogname"


class Occupation(_AccessTerm):
    tag = "occupation"


class Function(_AccessTerm):
    tag = "function"


class Title(_AccessTerm):
    tag = "title"
    render: Attribute = None


AgentName = Union[PersName, FamName, CorpName, Name]
AccessTerm = Union[PersName, FamName, CorpName, Name, Subject, GenreForm, GeogName, Occupation, Function, Title]


# --- Languages and scripts ---

class Language(PlainText):
    tag = "language"
    langcode: Attribute = None
    encodinganalog: Attribute = None


class Script(PlainText):
    tag = "script"
    scriptcode: Attribute = None
    encodinganalog: Attribute = None


class LanguageSet(Node):
    tag = "languageset"
    language: Many[Language] = []
    script: Many[Script] = []
    descriptivenote: One[DescriptiveNote] = None


class Abbr(PlainText):
    tag = "abbr"
    expan: Attribute = None

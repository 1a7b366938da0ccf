"""
Narrative sections, controlled access headings, relations and indexes.

Each section type is defined once and reused by <archdesc> and by every
component level.
"""

from __future__ import annotations

from .common import AccessTerm, Block, DateRange, DateSet, DateSingle, DescriptiveNote, GeogName, Head, ObjectXMLWrap
from .node import Attribute, FormattedText, Many, Node, One, PlainText


class _Section(Node):
    """head?, then paragraphs, lists, chronologies ... in document order."""
    localtype: Attribute = None
    encodinganalog: Attribute = None
    head: One[Head] = None
    blocks: Many[Block] = []


class AccessRestrict(_Section):
    tag = "accessrestrict"
    accessrestrict: Many[AccessRestrict] = []


class Accruals(_Section):
    tag = "accruals"
    accruals: Many[Accruals] = []


class AcqInfo(_Section):
    tag = "acqinfo"
    acqinfo: Many[AcqInfo] = []


class AltFormAvail(_Section):
    tag = "altformavail"
    altformavail: Many[AltFormAvail] = []


class Appraisal(_Section):
    tag = "appraisal"
    appraisal: Many[Appraisal] = []


class Arrangement(_Section):
    tag = "arrangement"
    arrangement: Many[Arrangement] = []


class Bibliography(_Section):
    tag = "bibliography"
    bibliography: Many[Bibliography] = []


class BiogHist(_Section):
    """Biographical or historical note."""
    tag = "bioghist"
    bioghist: Many[BiogHist] = []


class CustodHist(_Section):
    tag = "custodhist"
    custodhist: Many[CustodHist] = []


class FilePlan(_Section):
    tag = "fileplan"
    fileplan: Many[FilePlan] = []


class LegalStatus(_Section):
    tag = "legalstatus"
    legalstatus: Many[LegalStatus] = []


class Odd(_Section):
    """Other descriptive data."""
    tag = "odd"
    odd: Many[Odd] = []


class OriginalsLoc(_Section):
    tag = "originalsloc"
    originalsloc: Many[OriginalsLoc] = []


class OtherFindAid(_Section):
    tag = "otherfindaid"
    otherfindaid: Many[OtherFindAid] = []


class PhysTech(_Section):
    """Physical characteristics and technical requirements."""
    tag = "phystech"
    phystech: Many[PhysTech] = []


class PreferCite(_Section):
    tag = "prefercite"
    prefercite: Many[PreferCite] = []


class ProcessInfo(_Section):
    tag = "processinfo"
    processinfo: Many[ProcessInfo] = []


class RelatedMaterial(_Section):
    tag = "relatedmaterial"
    relatedmaterial: Many[RelatedMaterial] = []


class ScopeContent(_Section):
    tag = "scopecontent"
    scopecontent: Many[ScopeContent] = []


class SeparatedMaterial(_Section):
    tag = "separatedmaterial"
    separatedmaterial: Many[SeparatedMaterial] = []


class UseRestrict(_Section):
    tag = "userestrict"
    userestrict: Many[UseRestrict] = []


class Index(FormattedText):
    tag = "index"
    localtype: Attribute = None
    encodinganalog: Attribute = None


class ControlAccess(_Section):
    """
    Controlled access headings. Terms keep their document order; nested
    <controlaccess> elements group terms under their own heading.
    """
    tag = "controlaccess"
    terms: Many[AccessTerm] = []
    controlaccess: Many[ControlAccess] = []


class RelationEntry(PlainText):
    tag = "relationentry"
    localtype: Attribute = None
    scriptcode: Attribute = None
    transliteration: Attribute = None


class Relation(Node):
    tag = "relation"
    relationtype: Attribute = None
    otherrelationtype: Attribute = None
    href: Attribute = None
    linktitle: Attribute = None
    actuate: Attribute = None
    show: Attribute = None
    arcrole: Attribute = None
    linkrole: Attribute = None
    lastdatetimeverified: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    relationentry: Many[RelationEntry] = []
    objectxmlwrap: One[ObjectXMLWrap] = None
    datesingle: One[DateSingle] = None
    daterange: One[DateRange] = None
    dateset: One[DateSet] = None
    geogname: One[GeogName] = None
    descriptivenote: One[DescriptiveNote] = None


class Relations(Node):
    tag = "relations"
    relation: Many[Relation] = []


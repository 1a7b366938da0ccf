"""
Descriptive identification (<did>): title, dates, extent, origin and
location of a described unit. Used by <archdesc> and by every component.
"""

from __future__ import annotations

from .common import Address, AgentName, DateRange, DateSet, DateSingle, DescriptiveNote, Head, Language, LanguageSet
from .node import Attribute, FormattedText, Many, Node, One, PlainText, TextValue


class UnitID(PlainText):
    tag = "unitid"
    label: Attribute = None
    encodinganalog: Attribute = None
    countrycode: Attribute = None
    repositorycode: Attribute = None
    identifier: Attribute = None
    localtype: Attribute = None


class UnitTitle(FormattedText):
    tag = "unittitle"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    normal: Attribute = None


class UnitDate(PlainText):
    """Free-form date of the unit, e.g. '1912-1950, bulk 1920-1935'."""
    tag = "unitdate"
    label: Attribute = None
    encodinganalog: Attribute = None
    calendar: Attribute = None
    era: Attribute = None
    normal: Attribute = None
    certainty: Attribute = None
    unitdatetype: Attribute = None
    localtype: Attribute = None


class UnitDateStructured(Node):
    """Structured date of the unit: one datesingle, daterange or dateset."""
    tag = "unitdatestructured"
    label: Attribute = None
    certainty: Attribute = None
    unitdatetype: Attribute = None
    calendar: Attribute = None
    era: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    value: TextValue = None
    datesingle: One[DateSingle] = None
    daterange: One[DateRange] = None
    dateset: One[DateSet] = None


class Origination(Node):
    tag = "origination"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    names: Many[AgentName] = []


class Repository(Node):
    tag = "repository"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    names: Many[AgentName] = []
    address: One[Address] = None


class PhysDesc(FormattedText):
    tag = "physdesc"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None


class Quantity(PlainText):
    tag = "quantity"
    approximate: Attribute = None


class UnitType(PlainText):
    tag = "unittype"
    source: Attribute = None
    rules: Attribute = None
    identifier: Attribute = None
    encodinganalog: Attribute = None


class PhysFacet(FormattedText):
    tag = "physfacet"
    localtype: Attribute = None
    source: Attribute = None
    rules: Attribute = None
    identifier: Attribute = None


class Dimensions(FormattedText):
    tag = "dimensions"
    localtype: Attribute = None
    unit: Attribute = None


class PhysDescStructured(Node):
    """Extent as quantity + unit type, e.g. 3 linear feet."""
    tag = "physdescstructured"
    physdescstructuredtype: Attribute = None
    otherphysdescstructuredtype: Attribute = None
    coverage: Attribute = None
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    quantity: One[Quantity] = None
    unittype: One[UnitType] = None
    physfacet: Many[PhysFacet] = []
    dimensions: Many[Dimensions] = []
    descriptivenote: One[DescriptiveNote] = None


class PhysDescSet(Node):
    tag = "physdescset"
    coverage: Attribute = None
    parallel: Attribute = None
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    physdescstructured: Many[PhysDescStructured] = []
    descriptivenote: One[DescriptiveNote] = None


class LangMaterial(Node):
    tag = "langmaterial"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    value: TextValue = None
    language: Many[Language] = []
    languageset: Many[LanguageSet] = []
    descriptivenote: One[DescriptiveNote] = None


class MaterialSpec(FormattedText):
    tag = "materialspec"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None


class Abstract(FormattedText):
    tag = "abstract"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None


class PhysLoc(FormattedText):
    tag = "physloc"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None


class Container(PlainText):
    tag = "container"
    localtype: Attribute = None
    containerid: Attribute = None
    parent: Attribute = None
    label: Attribute = None
    encodinganalog: Attribute = None


class DAO(Node):
    """Digital archival object."""
    tag = "dao"
    href: Attribute = None
    daotype: Attribute = None
    otherdaotype: Attribute = None
    show: Attribute = None
    actuate: Attribute = None
    linktitle: Attribute = None
    coverage: Attribute = None
    identifier: Attribute = None
    localtype: Attribute = None
    entityref: Attribute = None
    xpointer: Attribute = None
    linkrole: Attribute = None
    arcrole: Attribute = None
    descriptivenote: One[DescriptiveNote] = None


class DAOSet(Node):
    tag = "daoset"
    label: Attribute = None
    coverage: Attribute = None
    localtype: Attribute = None
    dao: Many[DAO] = []
    descriptivenote: One[DescriptiveNote] = None


class DIDNote(FormattedText):
    tag = "didnote"
    label: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None


class DID(Node):
    tag = "did"
    encodinganalog: Attribute = None
    localtype: Attribute = None
    head: One[Head] = None
    unitid: Many[UnitID] = []
    unittitle: Many[UnitTitle] = []
    unitdate: Many[UnitDate] = []
    unitdatestructured: Many[UnitDateStructured] = []
    origination: Many[Origination] = []
    repository: Many[Repository] = []
    physdesc: Many[PhysDesc] = []
    physdescstructured: Many[PhysDescStructured] = []
    physdescset: Many[PhysDescSet] = []
    langmaterial: Many[LangMaterial] = []
    materialspec: Many[MaterialSpec] = []
    abstract: Many[Abstract] = []
    physloc: Many[PhysLoc] = []
    container: Many[Container] = []
    dao: Many[DAO] = []
    daoset: Many[DAOSet] = []
    didnote: Many[DIDNote] = []

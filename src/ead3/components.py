"""
Description of subordinate components (<dsc>).

Two numbering conventions coexist: the recursive <c> and the numbered chain
<c01> .. <c04>, where each level only accepts the next one.
"""

from __future__ import annotations

from .common import Block, Head
from .did import DID, Container, DIDNote
from .node import Attribute, Many, Node, One
from .sections import (
    AccessRestrict,
    Accruals,
    AcqInfo,
    AltFormAvail,
    Appraisal,
    Arrangement,
    Bibliography,
    BiogHist,
    ControlAccess,
    CustodHist,
    FilePlan,
    Index,
    LegalStatus,
    Odd,
    OriginalsLoc,
    OtherFindAid,
    PhysTech,
    PreferCite,
    ProcessInfo,
    RelatedMaterial,
    Relations,
    ScopeContent,
    SeparatedMaterial,
    UseRestrict,
)


class _Component(Node):
    level: Attribute = None
    otherlevel: Attribute = None
    encodinganalog: Attribute = None
    localtype: Attribute = None
    base: Attribute = None

    did: One[DID] = None
    bibliography: Many[Bibliography] = []
    bioghist: Many[BiogHist] = []
    scopecontent: Many[ScopeContent] = []
    arrangement: Many[Arrangement] = []
    controlaccess: Many[ControlAccess] = []
    relatedmaterial: Many[RelatedMaterial] = []
    relations: Many[Relations] = []
    accessrestrict: Many[AccessRestrict] = []
    userestrict: Many[UseRestrict] = []
    acqinfo: Many[AcqInfo] = []
    processinfo: Many[ProcessInfo] = []
    altformavail: Many[AltFormAvail] = []
    appraisal: Many[Appraisal] = []
    custodhist: Many[CustodHist] = []
    fileplan: Many[FilePlan] = []
    accruals: Many[Accruals] = []
    legalstatus: Many[LegalStatus] = []
    odd: Many[Odd] = []
    originalsloc: Many[OriginalsLoc] = []
    prefercite: Many[PreferCite] = []
    otherfindaid: Many[OtherFindAid] = []
    phystech: Many[PhysTech] = []
    separatedmaterial: Many[SeparatedMaterial] = []
    index: Many[Index] = []
    didnote: Many[DIDNote] = []
    container: Many[Container] = []


class C04(_Component):
    tag = "c04"


class C03(_Component):
    tag = "c03"
    c04: Many[C04] = []


class C02(_Component):
    tag = "c02"
    c03: Many[C03] = []


class C01(_Component):
    tag = "c01"
    c02: Many[C02] = []


class C(_Component):
    """Unnumbered component, nests to any depth."""
    tag = "c"
    c: Many[C] = []


class Dsc(Node):
    tag = "dsc"
    dsctype: Attribute = None
    otherdsctype: Attribute = None
    localtype: Attribute = None
    encodinganalog: Attribute = None
    head: One[Head] = None
    blocks: Many[Block] = []
    c: Many[C] = []
    c01: Many[C01] = []

from __future__ import annotations

from .components import Dsc
from .did import DID
from .node import Attribute, Many, Node, One, RequiredAttribute
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


class ArchDesc(Node):
    """Archival description: the collection as a whole, then its components."""
    tag = "archdesc"
    level: RequiredAttribute = None
    otherlevel: Attribute = None
    relatedencoding: Attribute = None
    base: Attribute = None
    localtype: Attribute = None
    encodinganalog: Attribute = None

    did: Many[DID] = []
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
    dsc: One[Dsc] = None

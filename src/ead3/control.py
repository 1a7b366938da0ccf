"""
The <control> section: identity, file description, maintenance and
declarations of an EAD3 record.
"""

from __future__ import annotations

from typing import Union

from .common import Abbr, Address, Citation, Date, DateRange, DateSingle, DescriptiveNote, Language, Num, ObjectXMLWrap, P, Script
from .node import Attribute, FormattedText, Mandatory, Many, Node, One, PlainText, RequiredAttribute


class RecordID(PlainText):
    tag = "recordid"
    localtype: Attribute = None
    instanceurl: Attribute = None


class OtherRecordID(PlainText):
    tag = "otherrecordid"
    localtype: Attribute = None


class Representation(PlainText):
    tag = "representation"
    href: Attribute = None
    linktitle: Attribute = None
    localtype: Attribute = None
    show: Attribute = None
    actuate: Attribute = None
    linkrole: Attribute = None
    arcrole: Attribute = None
    lastdatetimeverified: Attribute = None


# --- filedesc ---

class _Statement(FormattedText):
    encodinganalog: Attribute = None
    localtype: Attribute = None


class TitleProper(_Statement):
    tag = "titleproper"
    render: Attribute = None


class Subtitle(_Statement):
    tag = "subtitle"


class Author(_Statement):
    tag = "author"


class Sponsor(_Statement):
    tag = "sponsor"


class Publisher(_Statement):
    tag = "publisher"


class Edition(_Statement):
    tag = "edition"


class TitleStmt(Node):
    tag = "titlestmt"
    titleproper: Many[TitleProper] = []
    subtitle: Many[Subtitle] = []
    author: Many[Author] = []
    sponsor: Many[Sponsor] = []


class EditionStmt(Node):
    tag = "editionstmt"
    content: Many[Union[Edition, P]] = []


class PublicationStmt(Node):
    tag = "publicationstmt"
    content: Many[Union[Publisher, Date, Address, Num, P]] = []


class SeriesStmt(Node):
    tag = "seriesstmt"
    content: Many[Union[TitleProper, Num, P]] = []


class ControlNote(Node):
    tag = "controlnote"
    localtype: Attribute = None
    encodinganalog: Attribute = None
    p: Many[P] = []


class NoteStmt(Node):
    tag = "notestmt"
    controlnote: Many[ControlNote] = []


class FileDesc(Node):
    """Bibliographic description of the finding aid itself."""
    tag = "filedesc"
    encodinganalog: Attribute = None
    titlestmt: One[TitleStmt] = None
    editionstmt: One[EditionStmt] = None
    publicationstmt: One[PublicationStmt] = None
    seriesstmt: One[SeriesStmt] = None
    notestmt: One[NoteStmt] = None


# --- status and agency ---

class MaintenanceStatus(Node):
    tag = "maintenancestatus"
    value: RequiredAttribute = None


class PublicationStatus(Node):
    tag = "publicationstatus"
    value: RequiredAttribute = None


class AgencyCode(PlainText):
    tag = "agencycode"
    localtype: Attribute = None


class OtherAgencyCode(PlainText):
    tag = "otheragencycode"
    localtype: Attribute = None


class AgencyName(FormattedText):
    tag = "agencyname"
    localtype: Attribute = None


class MaintenanceAgency(Node):
    tag = "maintenanceagency"
    countrycode: Attribute = None
    encodinganalog: Attribute = None
    agencycode: One[AgencyCode] = None
    otheragencycode: Many[OtherAgencyCode] = []
    agencyname: Many[AgencyName] = []
    descriptivenote: One[DescriptiveNote] = None


# --- declarations ---

class LanguageDeclaration(Node):
    tag = "languagedeclaration"
    language: One[Language] = None
    script: One[Script] = None
    descriptivenote: One[DescriptiveNote] = None


class _Declaration(Node):
    abbr: One[Abbr] = None
    citation: One[Citation] = None
    descriptivenote: One[DescriptiveNote] = None


class ConventionDeclaration(_Declaration):
    tag = "conventiondeclaration"


class RightsDeclaration(_Declaration):
    tag = "rightsdeclaration"


class LocalTypeDeclaration(_Declaration):
    tag = "localtypedeclaration"


class Term(PlainText):
    tag = "term"
    identifier: Attribute = None
    lastdatetimeverified: Attribute = None


class LocalControl(Node):
    tag = "localcontrol"
    localtype: Attribute = None
    term: One[Term] = None
    datesingle: One[DateSingle] = None
    daterange: One[DateRange] = None


# --- maintenance history ---

class EventType(Node):
    tag = "eventtype"
    value: RequiredAttribute = None


class AgentType(Node):
    tag = "agenttype"
    value: RequiredAttribute = None


class EventDateTime(PlainText):
    tag = "eventdatetime"
    standarddatetime: Attribute = None


class Agent(PlainText):
    tag = "agent"


class EventDescription(FormattedText):
    tag = "eventdescription"


class MaintenanceEvent(Node):
    tag = "maintenanceevent"
    eventtype: One[EventType] = None
    eventdatetime: One[EventDateTime] = None
    agenttype: One[AgentType] = None
    agent: One[Agent] = None
    eventdescription: Many[EventDescription] = []


class MaintenanceHistory(Node):
    tag = "maintenancehistory"
    maintenanceevent: Many[MaintenanceEvent] = []


# --- sources ---

class SourceEntry(PlainText):
    tag = "sourceentry"
    scriptcode: Attribute = None
    transliteration: Attribute = None


class Source(Node):
    tag = "source"
    href: Attribute = None
    linktitle: Attribute = None
    show: Attribute = None
    actuate: Attribute = None
    linkrole: Attribute = None
    arcrole: Attribute = None
    lastdatetimeverified: Attribute = None
    sourceentry: Many[SourceEntry] = []
    objectxmlwrap: One[ObjectXMLWrap] = None
    descriptivenote: One[DescriptiveNote] = None


class Sources(Node):
    tag = "sources"
    source: Many[Source] = []


class Control(Node):
    """Record-level metadata of the finding aid."""
    tag = "control"
    countryencoding: Attribute = None
    dateencoding: Attribute = None
    langencoding: Attribute = None
    relatedencoding: Attribute = None
    repositoryencoding: Attribute = None
    scriptencoding: Attribute = None
    base: Attribute = None
    encodinganalog: Attribute = None

    recordid: Mandatory[RecordID] = None
    otherrecordid: Many[OtherRecordID] = []
    representation: Many[Representation] = []
    filedesc: Mandatory[FileDesc] = None
    maintenancestatus: Mandatory[MaintenanceStatus] = None
    publicationstatus: One[PublicationStatus] = None
    maintenanceagency: Mandatory[MaintenanceAgency] = None
    languagedeclaration: Mandatory[LanguageDeclaration] = None
    conventiondeclaration: Many[ConventionDeclaration] = []
    rightsdeclaration: Many[RightsDeclaration] = []
    localtypedeclaration: Many[LocalTypeDeclaration] = []
    localcontrol: Many[LocalControl] = []
    maintenancehistory: One[MaintenanceHistory] = None
    sources: One[Sources] = None

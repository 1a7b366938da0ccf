import os
import unittest
import warnings

from ead3 import EAD3_NAMESPACE, MalformedInputError, SchemaMismatchError, UnknownElementWarning, decode, encode, load
from ead3.common import DateRange, DateSingle, P, PersName, Subject
from ead3.did import Container
from ead3.sections import ControlAccess

FIXTURES = os.path.join(os.path.dirname(__file__), 'fixtures')

SAMPLE = (
    '<ead xmlns="http://ead3.archivists.org/schema/undeprecated/"><control><recordid>us-x-1</recordid>'
    '<filedesc><titlestmt><titleproper>T</titleproper></titlestmt></filedesc><maintenancestatus value="new"/>'
    '<maintenanceagency><agencyname>A</agencyname></maintenanceagency><languagedeclaration>'
    '<language langcode="eng"/></languagedeclaration></control><archdesc level="collection"><did>'
    '<unittitle>U</unittitle></did></archdesc></ead>'
)


def _document(did='<unittitle>U</unittitle>', control=None, archdesc_attributes=' level="collection"', archdesc_extra=''):
    if control is None:
        control = (
            '<recordid>us-x-1</recordid>'
            '<filedesc><titlestmt><titleproper>T</titleproper></titlestmt></filedesc>'
            '<maintenancestatus value="new"/>'
            '<maintenanceagency><agencyname>A</agencyname></maintenanceagency>'
            '<languagedeclaration><language langcode="eng"/></languagedeclaration>'
        )
    return (
        f'<ead xmlns="{EAD3_NAMESPACE}"><control>{control}</control>'
        f'<archdesc{archdesc_attributes}><did>{did}</did>{archdesc_extra}</archdesc></ead>'
    )


class TestSampleScenario(unittest.TestCase):

    def test_decode_sample(self):
        doc = decode(SAMPLE)
        self.assertEqual(doc.control.recordid.value, "us-x-1")
        self.assertEqual(doc.control.maintenancestatus.value, "new")
        self.assertEqual(doc.control.languagedeclaration.language.langcode, "eng")
        self.assertIsNone(doc.control.languagedeclaration.language.value)
        self.assertEqual(doc.archdesc.level, "collection")
        self.assertEqual(doc.archdesc.did[0].unittitle[0].value, "U")
        self.assertEqual(doc.xmlns, EAD3_NAMESPACE)

    def test_bytes_and_text_input_agree(self):
        self.assertEqual(decode(SAMPLE), decode(SAMPLE.encode("utf-8")))

    def test_absent_optional_parts_stay_absent(self):
        doc = decode(SAMPLE)
        self.assertIsNone(doc.control.publicationstatus)
        self.assertIsNone(doc.control.maintenancehistory)
        self.assertEqual(doc.control.otherrecordid, [])
        self.assertIsNone(doc.archdesc.dsc)
        self.assertEqual(doc.archdesc.bioghist, [])

    def test_unnamespaced_document(self):
        doc = decode(_document().replace(f' xmlns="{EAD3_NAMESPACE}"', ''))
        self.assertIsNone(doc.xmlns)
        self.assertEqual(doc.control.recordid.value, "us-x-1")


class TestFullDocument(unittest.TestCase):

    def setUp(self):
        self.doc = load(os.path.join(FIXTURES, 'full.xml'))

    def test_control(self):
        control = self.doc.control
        self.assertEqual(control.recordid.instanceurl, "https://example.org/ead/us-x-2")
        self.assertEqual(control.otherrecordid[0].value, "MS-0042")
        self.assertEqual(control.publicationstatus.value, "approved")
        self.assertEqual(control.maintenanceagency.agencycode.value, "GB-0001")
        self.assertEqual(control.languagedeclaration.script.scriptcode, "Latn")
        self.assertEqual(control.conventiondeclaration[0].abbr.expan, "Describing Archives: A Content Standard")
        self.assertEqual(len(control.maintenancehistory.maintenanceevent), 2)
        event = control.maintenancehistory.maintenanceevent[0]
        self.assertEqual(event.eventtype.value, "created")
        self.assertEqual(event.eventdescription[0].value, "Created from the <emph>typescript</emph> list.")
        self.assertEqual(control.sources.source[0].sourceentry[0].value, "Typescript list, 1975")

    def test_choice_lists_keep_document_order(self):
        kinds = [type(item).__name__ for item in self.doc.control.filedesc.publicationstmt.content]
        self.assertEqual(kinds, ["Publisher", "Date", "Address", "Num", "P"])
        blocks = self.doc.archdesc.scopecontent[0].blocks
        self.assertEqual([type(b).__name__ for b in blocks], ["P", "List", "P"])

    def test_formatted_text_keeps_inner_markup(self):
        did = self.doc.archdesc.did[0]
        self.assertEqual(did.unittitle[0].value, "Papers of <persname><part>Ada Lovelace</part></persname>")
        self.assertEqual(did.physdesc[0].value, "3 boxes, <emph>some fragile</emph>")
        p = self.doc.archdesc.bioghist[0].blocks[0]
        self.assertIsInstance(p, P)
        self.assertEqual(p.value, 'Ada Lovelace (1815-1852) was a <emph render="bold">mathematician</emph>.')

    def test_escaped_characters_stay_escaped_in_markup(self):
        p = self.doc.control.filedesc.publicationstmt.content[-1]
        self.assertEqual(p.value, "Published &amp; distributed by the archive.")

    def test_plain_text_is_unescaped(self):
        self.assertEqual(str(self.doc.archdesc.did[0].unitid[0]), "MS 42")

    def test_undeclared_attributes_are_kept(self):
        xml_lang = "{http://www.w3.org/XML/1998/namespace}lang"
        self.assertEqual(self.doc.archdesc.did[0].head.other_attributes, {xml_lang: "en"})
        xsi = "{http://www.w3.org/2001/XMLSchema-instance}schemaLocation"
        self.assertIn(xsi, self.doc.other_attributes)
        self.assertEqual(self.doc.namespaces, {"xsi": "http://www.w3.org/2001/XMLSchema-instance"})
        self.assertEqual(self.doc.audience, "external")

    def test_structured_dates(self):
        structured = self.doc.archdesc.did[0].unitdatestructured[0]
        self.assertIsNone(structured.value)
        self.assertIsInstance(structured.daterange, DateRange)
        self.assertEqual(structured.daterange.fromdate.standarddate, "1833")
        self.assertEqual(structured.daterange.todate.value, "1852")
        dateset = self.doc.archdesc.bioghist[0].blocks[1].chronitem[2].dateset
        self.assertEqual([type(d) for d in dateset.dates], [DateSingle, DateRange])

    def test_controlaccess_terms(self):
        controlaccess = self.doc.archdesc.controlaccess[0]
        self.assertEqual(controlaccess.head.value, "Subjects")
        self.assertIsInstance(controlaccess.terms[0], Subject)
        self.assertIsInstance(controlaccess.terms[1], PersName)
        self.assertEqual([p.value for p in controlaccess.terms[0].part], ["Computers", "History"])
        nested = controlaccess.controlaccess[0]
        self.assertIsInstance(nested, ControlAccess)
        self.assertEqual(len(nested.terms), 6)

    def test_nested_sections(self):
        bioghist = self.doc.archdesc.bioghist[0]
        self.assertEqual(bioghist.bioghist[0].head.value, "Family")
        self.assertEqual(bioghist.encodinganalog, "545")

    def test_names_and_extent(self):
        did = self.doc.archdesc.did[0]
        creator = did.origination[0].names[0]
        self.assertIsInstance(creator, PersName)
        self.assertEqual(creator.relator, "creator")
        self.assertEqual(did.repository[0].address.addressline[0].value, "1 Archive Road")
        self.assertEqual(did.physdescstructured[0].quantity.value, "1.5")
        self.assertEqual(len(did.physdescset[0].physdescstructured), 2)
        self.assertEqual(did.langmaterial[0].languageset[0].script[0].scriptcode, "Latn")
        self.assertEqual(len(did.daoset[0].dao), 2)

    def test_both_component_conventions(self):
        dsc = self.doc.archdesc.dsc
        self.assertEqual(dsc.dsctype, "combined")
        self.assertEqual(dsc.c[0].did.unittitle[0].value, "Loose papers")
        self.assertEqual(dsc.c01[0].c02[0].did.container[1].localtype, "folder")


class TestLeniency(unittest.TestCase):

    def test_self_closing_and_empty_elements_are_equal(self):
        closed = decode(_document('<container localtype="Folder"/>'))
        opened = decode(_document('<container localtype="Folder"></container>'))
        self.assertEqual(closed, opened)
        container = closed.archdesc.did[0].container[0]
        self.assertEqual(container, Container(localtype="Folder"))
        self.assertIsNone(container.value)

    def test_unknown_element_is_skipped_with_warning(self):
        with self.assertWarns(UnknownElementWarning):
            doc = decode(_document('<unittitle>U</unittitle><frobnicate>x</frobnicate>'))
        self.assertEqual(doc.archdesc.did[0].unittitle[0].value, "U")

    def test_numbered_component_does_not_accept_generic_component(self):
        dsc = '<dsc><c01><c02/><c/></c01></dsc>'
        with self.assertWarns(UnknownElementWarning):
            doc = decode(_document(archdesc_extra=dsc))
        c01 = doc.archdesc.dsc.c01[0]
        self.assertEqual(len(c01.c02), 1)
        self.assertEqual(doc.archdesc.dsc.c, [])

    def test_repeated_single_element_is_skipped_with_warning(self):
        did = '<head>One</head><head>Two</head>'
        with self.assertWarns(UnknownElementWarning):
            doc = decode(_document(did))
        self.assertEqual(doc.archdesc.did[0].head.value, "One")

    def test_comments_between_elements_are_ignored(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            doc = decode(_document('<!-- note --><unittitle>U</unittitle><!-- end -->'))
        self.assertEqual(doc.archdesc.did[0].unittitle[0].value, "U")

    def test_declared_entities_are_replaced_by_their_text(self):
        doctype = '<!DOCTYPE ead [<!ENTITY arch "Example Archive">]>'
        did = '<unitid>&arch; 42</unitid><unittitle>Papers held by <emph>&arch;</emph></unittitle>'
        doc = decode(doctype + _document(did))
        self.assertEqual(doc.archdesc.did[0].unitid[0].value, "Example Archive 42")
        self.assertEqual(doc.archdesc.did[0].unittitle[0].value, "Papers held by <emph>Example Archive</emph>")
        data = encode(doc)
        self.assertIn(b"<unitid>Example Archive 42</unitid>", data)
        self.assertNotIn(b"&amp;arch;", data)
        self.assertEqual(decode(data), doc)

    def test_mixed_content_drops_indentation_only(self):
        did = '<langmaterial>\n  <language langcode="eng"/>\n</langmaterial><langmaterial>English and French</langmaterial>'
        doc = decode(_document(did))
        first, second = doc.archdesc.did[0].langmaterial
        self.assertIsNone(first.value)
        self.assertEqual(second.value, "English and French")


class TestErrors(unittest.TestCase):

    def test_malformed_input(self):
        with self.assertRaises(MalformedInputError) as ctx:
            decode(b'<ead><control></ead>')
        self.assertIsNotNone(ctx.exception.__cause__)
        self.assertIsNotNone(ctx.exception.line)

    def test_empty_input(self):
        with self.assertRaises(MalformedInputError):
            decode(b'')

    def test_wrong_root(self):
        with self.assertRaises(SchemaMismatchError) as ctx:
            decode(b'<ead2002><control/></ead2002>')
        self.assertEqual(ctx.exception.missing, ["ead"])

    def test_missing_required_parts_are_all_reported(self):
        control = (
            '<filedesc><titlestmt><titleproper>T</titleproper></titlestmt></filedesc>'
            '<maintenanceagency><agencyname>A</agencyname></maintenanceagency>'
            '<languagedeclaration><language langcode="eng"/></languagedeclaration>'
        )
        with self.assertRaises(SchemaMismatchError) as ctx:
            decode(_document(control=control, archdesc_attributes=''))
        self.assertEqual(
            ctx.exception.missing,
            ["ead/control/recordid", "ead/control/maintenancestatus", "ead/archdesc/@level"],
        )

    def test_missing_required_attribute(self):
        control = (
            '<recordid>us-x-1</recordid>'
            '<filedesc/>'
            '<maintenancestatus/>'
            '<maintenanceagency/>'
            '<languagedeclaration/>'
        )
        with self.assertRaises(SchemaMismatchError) as ctx:
            decode(_document(control=control))
        self.assertEqual(ctx.exception.missing, ["ead/control/maintenancestatus/@value"])

    def test_missing_archdesc(self):
        xml = _document().split('<archdesc')[0] + '</ead>'
        with self.assertRaises(SchemaMismatchError) as ctx:
            decode(xml)
        self.assertEqual(ctx.exception.missing, ["ead/archdesc"])

    def test_wrong_input_type(self):
        with self.assertRaises(TypeError):
            decode(42)


if __name__ == '__main__':
    unittest.main()

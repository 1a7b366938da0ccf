import os
import unittest
from collections import Counter

from lxml import etree

from ead3 import Encoder, decode, encode
from ead3.components import C04

FIXTURES = os.path.join(os.path.dirname(__file__), 'fixtures')
FIXTURE_NAMES = ['minimal.xml', 'full.xml', 'numbered.xml', 'nested.xml', 'unordered.xml']


def _read(name):
    with open(os.path.join(FIXTURES, name), 'rb') as f:
        return f.read()


def _root(data):
    parser = etree.XMLParser(remove_comments=True)
    return etree.fromstring(data, parser)


def _content(data):
    """Multiset of (tag, attributes, text, tail) over every element, comments removed."""
    return Counter(
        (
            etree.QName(element).localname,
            tuple(sorted(element.attrib.items())),
            (element.text or "").strip(),
            (element.tail or "").strip(),
        )
        for element in _root(data).iter()
        if isinstance(element.tag, str)
    )


def _structure(data):
    """Child tag sequence of every element, in document order."""
    return [
        (etree.QName(element).localname, [etree.QName(child).localname for child in element])
        for element in _root(data).iter()
        if isinstance(element.tag, str)
    ]


class TestRoundTrip(unittest.TestCase):

    def test_idempotence(self):
        for name in FIXTURE_NAMES:
            with self.subTest(fixture=name):
                first = decode(_read(name))
                self.assertEqual(decode(encode(first)), first)

    def test_idempotence_without_pretty_print(self):
        for name in FIXTURE_NAMES:
            with self.subTest(fixture=name):
                first = decode(_read(name))
                self.assertEqual(decode(encode(first, pretty_print=False)), first)

    def test_content_is_preserved(self):
        for name in FIXTURE_NAMES:
            with self.subTest(fixture=name):
                data = _read(name)
                self.assertEqual(_content(encode(decode(data))), _content(data))

    def test_child_order_is_preserved(self):
        for name in FIXTURE_NAMES:
            with self.subTest(fixture=name):
                data = _read(name)
                self.assertEqual(_structure(encode(decode(data))), _structure(data))

    def test_child_order_survives_a_copy(self):
        data = _read('unordered.xml')
        copy = decode(data).model_copy(deep=True)
        self.assertEqual(_structure(encode(copy)), _structure(data))

    def test_sibling_order_in_unordered_fixture(self):
        doc = decode(encode(decode(_read('unordered.xml'))))
        root = Encoder().to_element(doc)
        did = root[1][0]
        self.assertEqual(
            [etree.QName(child).localname for child in did],
            ["unittitle", "unitid", "physdesc", "unitdate", "origination", "container", "abstract"],
        )
        self.assertEqual([s.blocks[0].value for s in doc.archdesc.scopecontent],
                         ["Notebooks on the Difference Engine.", "Letters from Ada Lovelace."])

    def test_encoding_is_stable(self):
        data = encode(decode(_read('full.xml')))
        self.assertEqual(encode(decode(data)), data)

    def test_latin1_round_trip(self):
        doc = decode(_read('nested.xml'))
        encoder = Encoder(encoding="ISO-8859-1")
        self.assertEqual(decode(encoder.encode(doc)), doc)
        self.assertEqual(doc.control.languagedeclaration.language.value, "français")


class TestDeepNesting(unittest.TestCase):

    def test_numbered_chain(self):
        doc = decode(encode(decode(_read('numbered.xml'))))
        c01 = doc.archdesc.dsc.c01[0]
        c03 = c01.c02[0].c03[0]
        self.assertEqual(c03.did.container[1].parent, "box-1")
        self.assertEqual([c.did.unittitle[0].value for c in c03.c04], ["Item 1.1.1.1", "Item 1.1.1.2"])
        self.assertIsInstance(c03.c04[0], C04)
        self.assertFalse(hasattr(c03.c04[0], "c05"))
        self.assertEqual(c01.scopecontent[0].blocks[0].value, 'Correspondence, <emph render="italic">in order</emph>.')
        self.assertEqual(doc.archdesc.dsc.c01[1].id, "s2")
        self.assertEqual(doc.archdesc.dsc.c, [])

    def test_generic_components_six_deep(self):
        doc = decode(encode(decode(_read('nested.xml'))))
        component = doc.archdesc.dsc.c[0]
        titles = []
        while True:
            titles.append(component.did.unittitle[0].value)
            if not component.c:
                break
            component = component.c[0]
        self.assertEqual(titles, ["Level %d" % n for n in range(1, 7)])
        self.assertEqual(component.level, "item")
        self.assertEqual(component.did.dao[0].href, "https://example.org/level6.jpg")
        self.assertEqual(doc.archdesc.dsc.c01, [])


if __name__ == '__main__':
    unittest.main()

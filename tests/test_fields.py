import unittest

from regdoc.fields import FieldTableRenderer
from regdoc.model import Field
from regdoc.tree import OutputRegion


class TestFieldTable(unittest.TestCase):
    def setUp(self):
        self.renderer = FieldTableRenderer()

    def test_header(self):
        table = self.renderer.build([])
        self.assertEqual(table.css_class, "fields")
        self.assertEqual(table.head[0].texts(), ("Bits", "Name", "Access", "Description"))
        self.assertEqual(
            [c.css_class for c in table.head[0]],
            ["fields_nbits", "fields_name", "fields_access", "fields_description"],
        )
        self.assertEqual(table.body, ())

    def test_rows_in_input_order(self):
        fields = [
            Field("f1", lsb=16, nbits=16, access="rw"),
            Field("f0", lsb=0, nbits=16, access="rw"),
        ]
        table = self.renderer.build(fields)
        self.assertEqual(len(table.body), 2)
        self.assertEqual(table.body[0].texts(), ("31:16", "f1", "rw", ""))
        self.assertEqual(table.body[1].texts(), ("15:0", "f0", "rw", ""))

    def test_single_bit_label(self):
        table = self.renderer.build([Field("ignore_descr_cs", lsb=11, nbits=1, access="rw")])
        self.assertEqual(table.body[0].cells[0].text, "11")

    def test_access_verbatim(self):
        table = self.renderer.build([Field("rsvd0", lsb=9, nbits=2, access="ro")])
        self.assertEqual(table.body[0].cells[2].text, "ro")

    def test_description_line_breaks(self):
        doc = "Select the mode:\r\n\r\n* 0 -- any\n* 1 -- batch"
        table = self.renderer.build([Field("done_irq_mode", lsb=8, nbits=1, doc=doc)])
        cell = table.body[0].cells[3]
        self.assertEqual(cell.text, "Select the mode:<br><br>* 0 -- any<br>* 1 -- batch")
        self.assertTrue(cell.markup)

    def test_custom_line_break(self):
        renderer = FieldTableRenderer(line_break="<br/>")
        table = renderer.build([Field("a", lsb=0, nbits=32, doc="x\ny")])
        self.assertEqual(table.body[0].cells[3].text, "x<br/>y")

    def test_missing_doc_is_empty(self):
        table = self.renderer.build([Field("a", lsb=0, nbits=32, doc=None)])
        self.assertEqual(table.body[0].cells[3].text, "")

    def test_render_replaces_region(self):
        region = OutputRegion("fields")
        self.renderer.render(region, [Field("a", lsb=0, nbits=32)])
        self.renderer.render(region, [Field("b", lsb=0, nbits=16), Field("c", lsb=16, nbits=16)])
        self.assertEqual([r.cells[1].text for r in region.content.body], ["b", "c"])


if __name__ == "__main__":
    unittest.main()

import unittest

from regdoc.errors import RegisterValidationError
from regdoc.loader import sample_catalog
from regdoc.model import Field, RegisterDefinition
from regdoc.validation import find_issues, validate_fields, validate_register


class TestFindIssues(unittest.TestCase):
    def test_valid_half_words(self):
        fields = [Field("f1", lsb=16, nbits=16), Field("f0", lsb=0, nbits=16)]
        self.assertEqual(find_issues(fields), [])

    def test_sample_registers_are_valid(self):
        for reg in sample_catalog():
            self.assertEqual(find_issues(reg.fields), [], reg.name)

    def test_zero_width(self):
        issues = find_issues([Field("z", lsb=0, nbits=0), Field("r", lsb=0, nbits=32)])
        self.assertEqual(issues[0].index, 0)
        self.assertEqual(issues[0].name, "z")
        self.assertIn("nbits", issues[0].message)

    def test_lsb_out_of_range(self):
        issues = find_issues([Field("neg", lsb=-1, nbits=1), Field("r", lsb=0, nbits=31)])
        self.assertIn("lsb -1", issues[0].message)

    def test_field_past_top(self):
        issues = find_issues([Field("hi", lsb=28, nbits=8), Field("r", lsb=0, nbits=24)])
        self.assertEqual(issues[0].name, "hi")
        self.assertIn("35:28", issues[0].message)

    def test_overlap_names_both_fields(self):
        fields = [Field("a", lsb=8, nbits=8), Field("b", lsb=12, nbits=8), Field("c", lsb=0, nbits=8)]
        messages = [str(i) for i in find_issues(fields)]
        self.assertTrue(any("'b'" in m and "overlaps field #0 'a'" in m for m in messages))

    def test_total_width_short(self):
        issues = find_issues([Field("a", lsb=0, nbits=8)])
        self.assertEqual(len(issues), 1)
        self.assertIsNone(issues[0].index)
        self.assertIn("8 bits, expected 32", issues[0].message)

    def test_empty_name(self):
        issues = find_issues([Field("", lsb=0, nbits=32)])
        self.assertEqual(issues[0].message, "name is empty")

    def test_collects_all_issues(self):
        fields = [Field("a", lsb=40, nbits=1), Field("b", lsb=0, nbits=0)]
        issues = find_issues(fields)
        # two field issues plus the total width
        self.assertEqual(len(issues), 3)


class TestValidateFields(unittest.TestCase):
    def test_valid_does_not_raise(self):
        validate_fields([Field("all", lsb=0, nbits=32)])

    def test_invalid_raises_with_issues(self):
        with self.assertRaises(RegisterValidationError) as ctx:
            validate_fields([Field("a", lsb=0, nbits=4)], register="CTRL")
        self.assertEqual(ctx.exception.register, "CTRL")
        self.assertEqual(len(ctx.exception.issues), 1)
        self.assertIn("CTRL", str(ctx.exception))

    def test_validate_register(self):
        reg = RegisterDefinition("BAD", [Field("a", lsb=0, nbits=16), Field("b", lsb=8, nbits=16)])
        with self.assertRaises(RegisterValidationError) as ctx:
            validate_register(reg)
        self.assertEqual(ctx.exception.register, "BAD")


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import unittest

from citebuilder.rendering.expander import FragmentExpander, is_truthy
from citebuilder.runtime.config import BuildOptions


class ExpanderTests(unittest.TestCase):
    def _exp(self, data, **opts) -> FragmentExpander:
        return FragmentExpander(data, options=BuildOptions(**opts))

    def test_expand_leaf(self) -> None:
        self.assertEqual(", by Ada", self._exp({"a": "Ada"}).expand(", by @a"))

    def test_expand_escapes_value(self) -> None:
        self.assertEqual("\\{x\\}", self._exp({"a": "{x}"}).expand("@a"))

    def test_expand_missing_removes_fragment(self) -> None:
        self.assertEqual("", self._exp({}).expand(", by @a"))

    def test_expand_missing_debug_placeholder(self) -> None:
        self.assertEqual(", by [a]", self._exp({}, debug=True).expand(", by @a"))

    def test_expand_replaces_only_the_matched_token(self) -> None:
        self.assertEqual("Ada \\@a", self._exp({"a": "Ada"}).expand("@a \\@a"))

    def test_resolve_combo(self) -> None:
        exp = self._exp({"A": "John", "C": "Alice"})
        self.assertEqual("John, Alice", exp.resolve("A+B+C"))
        self.assertEqual("", exp.resolve("B+D"))

    def test_lookup_stringifies(self) -> None:
        self.assertEqual("0", self._exp({"n": 0}).lookup("n"))

    def test_truthiness(self) -> None:
        self.assertFalse(is_truthy(None))
        self.assertFalse(is_truthy(False))
        self.assertFalse(is_truthy(""))
        self.assertTrue(is_truthy("x"))
        self.assertFalse(is_truthy([]))
        self.assertFalse(is_truthy(()))
        self.assertFalse(is_truthy({}))
        self.assertTrue(is_truthy(["x"]))
        self.assertTrue(is_truthy(0))

    def test_single_pass_resolves_innermost_layer(self) -> None:
        exp = self._exp({"a": "A", "b": "B"})
        self.assertEqual("{@a B}", exp.parse("{@a{ @b}}"))
        self.assertEqual("A B", exp.parse("{@a B}"))

    def test_identical_fragments_resolve_together(self) -> None:
        self.assertEqual("x|x", self._exp({"a": "x"}).parse("{@a}|{@a}"))

    def test_literal_fragment_untouched(self) -> None:
        self.assertEqual("@a {x}", self._exp({"a": "A"}).parse("@a {x}"))


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import io
import json
import logging
import unittest

from citebuilder import CitationTemplateEngine, InvalidTemplate, template_engine_factory
from citebuilder.logging.factory import DefaultLoggerFactory
from citebuilder.logging.helpers import JsonLogFormatter, get_logger, trace
from citebuilder.runtime.config import BuildOptions


class BuildOptionsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        opts = BuildOptions()
        self.assertFalse(opts.debug)
        self.assertFalse(opts.strict)
        self.assertEqual(", ", opts.combo_separator)
        self.assertEqual("[{key}]", opts.placeholder)
        self.assertIsNone(opts.max_passes)

    def test_from_env(self) -> None:
        opts = BuildOptions.from_env({
            "CITEBUILDER_DEBUG": "yes",
            "CITEBUILDER_STRICT": "0",
            "CITEBUILDER_COMBO_SEPARATOR": " and ",
        })
        self.assertTrue(opts.debug)
        self.assertFalse(opts.strict)
        self.assertEqual(" and ", opts.combo_separator)

    def test_from_empty_env(self) -> None:
        self.assertEqual(BuildOptions(), BuildOptions.from_env({}))

    def test_with_overrides_skips_none(self) -> None:
        opts = BuildOptions(debug=True).with_overrides(debug=None, strict=True)
        self.assertTrue(opts.debug)
        self.assertTrue(opts.strict)

    def test_invalid_max_passes(self) -> None:
        with self.assertRaises(ValueError):
            BuildOptions(max_passes=0)


class TemplateEngineTests(unittest.TestCase):
    def test_render(self) -> None:
        engine = CitationTemplateEngine()
        self.assertEqual("T, by A", engine.render("{@t}{, by @a}{, @b}", {"t": "T", "a": "A"}))

    def test_render_many(self) -> None:
        engine = CitationTemplateEngine(options=BuildOptions(combo_separator=" & "))
        out = engine.render_many("{@A+B}", [{"A": "x", "B": "y"}, {"B": "y"}, {}])
        self.assertEqual(["x & y", "y", ""], out)

    def test_errors_propagate(self) -> None:
        with self.assertRaises(InvalidTemplate):
            CitationTemplateEngine().render("{@a", {})

    def test_factory_uses_explicit_options(self) -> None:
        engine = template_engine_factory(options=BuildOptions(debug=True))
        self.assertEqual("[a]", engine.render("{@a}", {}))


class LoggingHelpersTests(unittest.TestCase):
    def test_factory_level_follows_debug_option(self) -> None:
        self.assertEqual(logging.INFO, DefaultLoggerFactory.from_options(BuildOptions()).level)
        self.assertEqual(logging.DEBUG, DefaultLoggerFactory.from_options(BuildOptions(debug=True)).level)
        self.assertEqual(logging.WARNING, DefaultLoggerFactory(options=BuildOptions(debug=True), level=logging.WARNING).level)

    def test_factory_trace_sink(self) -> None:
        sink = DefaultLoggerFactory(stream=io.StringIO()).trace_sink()
        self.assertEqual("citebuilder.builder", sink.name)

    def test_logger_namespace(self) -> None:
        self.assertEqual("citebuilder", get_logger().name)
        self.assertEqual("citebuilder.expand", get_logger("expand").name)
        self.assertEqual("citebuilder.cli", get_logger("citebuilder.cli").name)

    def test_json_formatter(self) -> None:
        record = logging.LogRecord("citebuilder.x", logging.INFO, __file__, 1, "hello %s", ("there",), None)
        record.context = {"pass_no": 1}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual("hello there", payload["msg"])
        self.assertEqual("INFO", payload["level"])
        self.assertEqual({"pass_no": 1}, payload["ctx"])
        self.assertIn("version", payload)

    def test_trace_includes_context(self) -> None:
        stream = io.StringIO()
        lg = logging.getLogger("citebuilder.test_trace")
        handler = logging.StreamHandler(stream)
        lg.addHandler(handler)
        lg.setLevel(logging.DEBUG)
        try:
            trace(lg, "segment", segment="@a")
        finally:
            lg.removeHandler(handler)
        self.assertIn("segment | ctx={'segment': '@a'}", stream.getvalue())


if __name__ == "__main__":
    unittest.main()

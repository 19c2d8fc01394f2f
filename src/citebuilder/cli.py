from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional, Sequence

from citebuilder.core.errors import CitationError, InvalidDataMapping
from citebuilder.logging.factory import DefaultLoggerFactory
from citebuilder.logging.helpers import get_logger
from citebuilder.rendering.template_engine import CitationTemplateEngine
from citebuilder.runtime.config import BuildOptions

logger = get_logger('citebuilder')

EXIT_IO = 1
EXIT_TEMPLATE = 2


class _CliExit(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _configure_logging(options: BuildOptions, enable_json: bool) -> DefaultLoggerFactory:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory.from_options(options, json_logs=enable_json)
    global logger
    logger = factory.get_logger('citebuilder')
    return factory


def _fatal(msg: str, code: int = EXIT_IO) -> NoReturn:
    """Log *msg* as an error and abort the current run with *code*."""
    logger.error(msg)
    raise _CliExit(code)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='citebuilder',
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            'citebuilder – render a citation from a fragment template and a data mapping\n'
            'Fragments look like "{, by @author}" and vanish when @author is empty.'
        ),
    )

    g_tpl = p.add_argument_group('Template')
    g_dat = p.add_argument_group('Data')
    g_out = p.add_argument_group('Output & diagnostics')

    src = g_tpl.add_mutually_exclusive_group(required=True)
    src.add_argument('-t', '--template', metavar='TEXT', dest='template',
                     help='Citation template given inline.')
    src.add_argument('-T', '--template-file', metavar='FILE', dest='template_file',
                     help='Read the template from FILE (newlines are folded away).')
    g_tpl.add_argument('--strict', action='store_true', default=None,
                       help='Reject templates whose brackets do not nest properly.')
    g_tpl.add_argument('--separator', metavar='SEP', dest='combo_separator',
                       help='Joiner for combo tokens such as @A+B+C (default ", ").')

    g_dat.add_argument('-d', '--data', metavar='FILE', dest='data_file',
                       help='JSON object with the data mapping ("-" reads stdin).')
    g_dat.add_argument('-e', '--set', metavar='KEY=VALUE', action='append', dest='assignments', default=[],
                       help='Set a single key. Repeatable; applied after --data.')

    g_out.add_argument('-o', '--output', metavar='FILE', dest='output',
                       help='Write the citation to FILE instead of stdout.')
    g_out.add_argument('--debug', action='store_true', default=None,
                       help='Show unresolved tokens as [key] and trace every pass.')
    g_out.add_argument('--json-logs', action='store_true', dest='json_logs',
                       help='Emit log records as JSON.')
    return p


def _parse_assignments(items: Sequence[str]) -> Dict[str, str]:
    pairs: Dict[str, str] = {}
    for kv in items:
        if '=' not in kv:
            _fatal(f"-e/--set expects KEY=VALUE (got '{kv}')")
        key, val = kv.split('=', 1)
        key = key.strip()
        if not key:
            _fatal(f"-e/--set expects a non-empty KEY (got '{kv}')")
        pairs[key] = val
    return pairs


def _read_text(ref: str) -> str:
    try:
        if ref == '-':
            return sys.stdin.read()
        return Path(ref).read_text(encoding='utf-8')
    except OSError as exc:
        _fatal(f'cannot read {ref}: {exc}')


def _load_data(ns: argparse.Namespace) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if ns.data_file:
        raw = _read_text(ns.data_file)
        try:
            loaded = json.loads(raw)
        except json.JSONDecodeError as exc:
            _fatal(f'invalid JSON in {ns.data_file}: {exc}')
        if not isinstance(loaded, dict):
            raise InvalidDataMapping(f'data file {ns.data_file} must hold a JSON object, got {type(loaded).__name__}')
        data.update(loaded)
    data.update(_parse_assignments(ns.assignments))
    return data


def run(argv: Optional[List[str]] = None) -> str:
    """Parse *argv*, render the citation and return it."""
    ns = _build_parser().parse_args(argv)
    options = BuildOptions.from_env().with_overrides(
        debug=ns.debug,
        strict=ns.strict,
        combo_separator=ns.combo_separator,
    )
    factory = _configure_logging(options, ns.json_logs)

    template = ns.template if ns.template is not None else _read_text(ns.template_file)
    try:
        data = _load_data(ns)
        engine = CitationTemplateEngine(options=options, logger=factory.trace_sink())
        citation = engine.render(template, data)
    except CitationError as exc:
        _fatal(str(exc), EXIT_TEMPLATE)

    if ns.output:
        try:
            Path(ns.output).write_text(citation + '\n', encoding='utf-8')
        except OSError as exc:
            _fatal(f'cannot write {ns.output}: {exc}')
    else:
        sys.stdout.write(citation + '\n')
    return citation


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit status."""
    try:
        run(argv)
    except _CliExit as exc:
        return exc.code
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from citebuilder.constants import COMBO_SEPARATOR, DEBUG_PLACEHOLDER

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class BuildOptions:
    """Immutable configuration blob handed to every CitationBuilder.

    Attributes:
        debug: Render unresolved tokens as placeholders and emit trace records.
        strict: Run the full bracket matcher on top of the coarse balance check.
        combo_separator: Joiner for the truthy members of a combo token.
        placeholder: Debug placeholder, formatted with ``key``.
        max_passes: Optional hard cap on fixed-point passes (None = unbounded).
    """
    debug: bool = False
    strict: bool = False
    combo_separator: str = COMBO_SEPARATOR
    placeholder: str = DEBUG_PLACEHOLDER
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f'max_passes must be >= 1 (got {self.max_passes})')

    def with_overrides(self, **changes) -> 'BuildOptions':
        """Return a copy with the non-None *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BuildOptions':
        """Build options from CITEBUILDER_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            debug=_env_flag(env, 'CITEBUILDER_DEBUG', False),
            strict=_env_flag(env, 'CITEBUILDER_STRICT', False),
            combo_separator=env.get('CITEBUILDER_COMBO_SEPARATOR') or COMBO_SEPARATOR,
        )

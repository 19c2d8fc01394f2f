from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for string-based citation template engines."""

    def render(self, template: str, variables: Mapping[str, Optional[Any]]) -> str:
        ...

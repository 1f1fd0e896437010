"""Source locations"""

from typing import Any, Dict, NamedTuple

__all__ = ["SourceLocation"]


class SourceLocation(NamedTuple):
    """Represents a location (line and column) in a GraphQL source."""

    line: int
    column: int

    @property
    def formatted(self) -> Dict[str, int]:
        return dict(line=self.line, column=self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, dict):
            return self.formatted == other
        return tuple(self) == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.line, self.column))

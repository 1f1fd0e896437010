from typing import Any, Collection, Dict, List, Optional, Tuple, Type, Union

from ..language.location import SourceLocation

__all__ = ["PhaseError", "format_error", "print_error"]


class PhaseError(Exception):
    """Phase Error

    A PhaseError describes a problem found by one of the phases processing a GraphQL
    document. In addition to a message, it also includes the phase that found the
    problem and the locations in the GraphQL document which correspond to the error.

    Phase errors are usually not raised, but attached to the ``errors`` of the
    blueprint node they are about.
    """

    message: str
    """A message describing the Error for debugging purposes"""

    phase: Optional[Type]
    """The phase that produced this error

    Allows consumers to filter or group errors by the check that found them.
    """

    locations: Optional[List[SourceLocation]]
    """Source locations

    A list of (line, column) locations within the source GraphQL document which
    correspond to this error.
    """

    extensions: Dict[str, Any]
    """Extension fields to add to the formatted error"""

    __slots__ = ("message", "phase", "locations", "extensions")

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        phase: Optional[Type] = None,
        locations: Optional[
            Collection[Union[SourceLocation, Tuple[int, int]]]
        ] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.phase = phase
        self.locations = (
            [SourceLocation(*location) for location in locations]
            if locations
            else None
        )
        self.extensions = extensions or {}

    def __str__(self) -> str:
        return print_error(self)

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.phase:
            args.append(f"phase={self.phase.__name__}")
        if self.locations:
            args.append(f"locations={self.locations!r}")
        if self.extensions:
            args.append(f"extensions={self.extensions!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, PhaseError)
            and self.__class__ == other.__class__
            and all(
                getattr(self, slot) == getattr(other, slot) for slot in self.__slots__
            )
        ) or (
            isinstance(other, dict)
            and "message" in other
            and all(
                slot in self.__slots__ and getattr(self, slot) == other.get(slot)
                for slot in other
            )
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get error formatted according to the GraphQL response format."""
        return format_error(self)


def print_error(error: PhaseError) -> str:
    """Print a PhaseError to a string.

    The message is followed by the line and column of each location of the error.
    """
    output = error.message
    if error.locations:
        output += "\n\nat " + ", ".join(map(str, error.locations))
    return output


def format_error(error: PhaseError) -> Dict[str, Any]:
    """Format a phase error.

    Given a PhaseError, format it according to the rules described by the "Response
    Format, Errors" section of the GraphQL Specification.
    """
    if not isinstance(error, PhaseError):
        raise TypeError("Expected a PhaseError.")
    formatted: Dict[str, Any] = dict(
        message=error.message or "An unknown error occurred.",
        locations=(
            [location.formatted for location in error.locations]
            if error.locations is not None
            else None
        ),
    )
    if error.extensions:
        formatted.update(extensions=error.extensions)
    return formatted

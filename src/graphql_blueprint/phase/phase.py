from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, NamedTuple

from ..language import Document

__all__ = ["Phase", "PhaseResult", "Status"]


class Status(Enum):
    """Outcome of running a phase"""

    OK = "ok"
    ERROR = "error"

    @classmethod
    def from_error_count(cls, error_count: int) -> "Status":
        """Get the status of a phase that has found the given number of errors."""
        return cls.OK if error_count == 0 else cls.ERROR


class PhaseResult(NamedTuple):
    """The status of a phase and the document it produced"""

    status: Status
    document: Document


class Phase(ABC):
    """Base class for all phases

    A phase is one step in processing a GraphQL document. It receives the blueprint
    of the document and returns its status together with a blueprint that may have
    been annotated with errors. Deciding whether to continue after a phase reported
    an error is up to the caller.

    Phases do not keep state between runs. All of their methods are class methods.
    """

    @classmethod
    @abstractmethod
    def run(cls, input_: Document, **options: Any) -> PhaseResult:
        """Run the phase on the given document."""

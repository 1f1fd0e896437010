import logging
from copy import copy
from typing import Any, List, Optional, Sequence, Tuple

from ..error import PhaseError
from ..language import Document, FragmentSpread, NamedFragment, Visitor, visit
from ..phase import Phase, PhaseResult, Status
from ..pyutils import Digraph

__all__ = ["NoFragmentCycles", "FragmentGraphVisitor", "run"]

logger = logging.getLogger(__name__)


class FragmentGraphVisitor(Visitor):
    """Visitor adding the fragments and their spreads to a dependency graph

    Every spread found anywhere below a named fragment, including spreads inside of
    fields and inline fragments, becomes an edge from that named fragment to the
    spread fragment.
    """

    def __init__(self, graph: Digraph):
        super().__init__()
        self.graph = graph
        self.fragment_name: Optional[str] = None

    def enter_named_fragment(self, node: NamedFragment, *_args: Any) -> None:
        self.fragment_name = self.graph.add_vertex(node.name)

    def leave_named_fragment(self, *_args: Any) -> None:
        self.fragment_name = None

    def enter_fragment_spread(self, node: FragmentSpread, *_args: Any) -> None:
        # spreads outside of named fragments cannot take part in a cycle
        if self.fragment_name is not None:
            self.graph.add_edge(self.fragment_name, node.name)


class NoFragmentCycles(Phase):
    """No fragment cycles

    Ensure that the document doesn't have any fragment cycles that could result in a
    loop during execution.

    The errors are attached to every fragment that is part of a cycle. Note that if
    this phase fails, an error should immediately be given to the user.
    """

    @classmethod
    def run(cls, input_: Document, **_options: Any) -> PhaseResult:
        """Run the validation."""
        if not isinstance(input_, Document):
            raise TypeError("You must provide a blueprint document.")
        fragments, error_count = check(input_.fragments)
        document = copy(input_)
        document.fragments = fragments
        return PhaseResult(Status.from_error_count(error_count), document)


def run(document: Document) -> PhaseResult:
    """Check the given document for fragment cycles."""
    return NoFragmentCycles.run(document)


def check(fragments: Sequence[NamedFragment]) -> Tuple[List[NamedFragment], int]:
    """Check a list of fragments for cycles.

    Returns copies of the fragments with the cycle errors prepended to their errors,
    and the number of errors that have been added.
    """
    modified: List[NamedFragment] = []
    error_count = 0
    with Digraph() as graph:
        visitor = FragmentGraphVisitor(graph)
        for fragment in fragments:
            visit(fragment, visitor)
        logger.debug(
            "Checking %d fragments with %d spreads for cycles.",
            len(fragments),
            graph.edge_count,
        )
        for fragment in fragments:
            errors_to_add = cycle_errors(fragment, graph.get_cycle(fragment.name))
            fragment_with_errors = copy(fragment)
            fragment_with_errors.errors = errors_to_add + list(fragment.errors)
            modified.append(fragment_with_errors)
            error_count += len(errors_to_add)
    return modified, error_count


def cycle_errors(
    fragment: NamedFragment, cycle: Optional[List[str]]
) -> List[PhaseError]:
    """Get the errors for the given cycle through the given fragment."""
    if not cycle:
        return []
    logger.debug("Fragment %r forms a cycle: %s.", fragment.name, cycle)
    if len(cycle) == 1:
        return [cycle_error(fragment, "forms a cycle with itself")]
    deps = " => ".join(f"'{name}'" for name in cycle)
    return [cycle_error(fragment, f"forms a cycle via: ({deps})")]


def cycle_error(fragment: NamedFragment, message: str) -> PhaseError:
    location = fragment.source_location
    return PhaseError(
        message,
        phase=NoFragmentCycles,
        locations=[location] if location else None,
    )

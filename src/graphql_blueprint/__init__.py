"""GraphQL-Blueprint

GraphQL-Blueprint turns GraphQL documents into blueprints, annotated trees which are
passed through a series of phases, each of which can attach errors to the nodes it
has problems with.

The parsing of GraphQL source is done by GraphQL-core. This package provides the
blueprint representation and the phases working on it, currently the validation that
fragment spreads do not form cycles.

This top-level package exports the public API. The sub-packages are:

  - `graphql_blueprint.language`: The blueprint nodes, visiting and building them.
  - `graphql_blueprint.error`: Creating and formatting phase errors.
  - `graphql_blueprint.phase`: The base of all phases and their results.
  - `graphql_blueprint.validation`: The validation phases.
  - `graphql_blueprint.pyutils`: Utilities used internally.
"""

# The version of this package
from .version import version, version_info

# Blueprint and building it from GraphQL source
from .language import (
    SourceLocation,
    Node,
    Document,
    OperationType,
    OperationDefinition,
    NamedFragment,
    Selection,
    Field,
    InlineFragment,
    FragmentSpread,
    visit,
    Visitor,
    BREAK,
    SKIP,
    IDLE,
    from_ast,
    parse_blueprint,
)

# Errors attached by the phases
from .error import PhaseError, format_error, print_error

# Phases
from .phase import Phase, PhaseResult, Status
from .validation import NoFragmentCycles

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "SourceLocation",
    "Node",
    "Document",
    "OperationType",
    "OperationDefinition",
    "NamedFragment",
    "Selection",
    "Field",
    "InlineFragment",
    "FragmentSpread",
    "visit",
    "Visitor",
    "BREAK",
    "SKIP",
    "IDLE",
    "from_ast",
    "parse_blueprint",
    "PhaseError",
    "format_error",
    "print_error",
    "Phase",
    "PhaseResult",
    "Status",
    "NoFragmentCycles",
]

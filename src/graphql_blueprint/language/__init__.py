"""GraphQL Blueprint Language

The :mod:`graphql_blueprint.language` package is responsible for the blueprint, the
annotated tree representation of a GraphQL document, and for building it from the
GraphQL source.
"""

from .location import SourceLocation

from .blueprint import (
    Node,
    Document,
    OperationType,
    OperationDefinition,
    NamedFragment,
    Selection,
    Field,
    InlineFragment,
    FragmentSpread,
    BLUEPRINT_KEYS,
)

from .visitor import visit, Visitor, VisitorAction, BREAK, SKIP, IDLE

from .from_ast import from_ast, parse_blueprint

__all__ = [
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
    "BLUEPRINT_KEYS",
    "visit",
    "Visitor",
    "VisitorAction",
    "BREAK",
    "SKIP",
    "IDLE",
    "from_ast",
    "parse_blueprint",
]

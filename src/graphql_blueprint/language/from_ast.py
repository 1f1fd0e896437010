"""Building blueprints from GraphQL ASTs

The blueprint does not have a parser of its own. GraphQL source is parsed by
GraphQL-core, and the resulting AST is converted into a blueprint here.
"""

from typing import List, Optional, Union

from graphql.language import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    Node as AstNode,
    OperationDefinitionNode,
    SelectionSetNode,
    Source,
    get_location,
    parse,
)

from .blueprint import (
    Document,
    Field,
    FragmentSpread,
    InlineFragment,
    NamedFragment,
    OperationDefinition,
    OperationType,
    Selection,
)
from .location import SourceLocation

__all__ = ["from_ast", "parse_blueprint"]


def parse_blueprint(source: Union[Source, str], no_location: bool = False) -> Document:
    """Parse GraphQL source into a blueprint document.

    Throws a GraphQLSyntaxError from GraphQL-core if a syntax error is encountered.
    """
    return from_ast(parse(source, no_location=no_location))


def from_ast(document_node: DocumentNode) -> Document:
    """Convert a GraphQL document AST into a blueprint document.

    Operation and fragment definitions are carried over in the order in which they
    appear in the document. Type system definitions and extensions are ignored.
    """
    if not isinstance(document_node, DocumentNode):
        raise TypeError("Must provide a document node.")
    operations: List[OperationDefinition] = []
    fragments: List[NamedFragment] = []
    for definition in document_node.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            fragments.append(
                NamedFragment(
                    name=definition.name.value,
                    type_condition=definition.type_condition.name.value,
                    selections=selections_from_ast(definition.selection_set),
                    source_location=source_location_from_ast(definition),
                )
            )
        elif isinstance(definition, OperationDefinitionNode):
            operations.append(
                OperationDefinition(
                    name=definition.name.value if definition.name else None,
                    type=OperationType(definition.operation.value),
                    selections=selections_from_ast(definition.selection_set),
                    source_location=source_location_from_ast(definition),
                )
            )
    return Document(
        operations=operations,
        fragments=fragments,
        source_location=source_location_from_ast(document_node),
    )


def selections_from_ast(selection_set: Optional[SelectionSetNode]) -> List[Selection]:
    if not selection_set:
        return []
    selections: List[Selection] = []
    append_selection = selections.append
    for node in selection_set.selections:
        source_location = source_location_from_ast(node)
        if isinstance(node, FieldNode):
            append_selection(
                Field(
                    name=node.name.value,
                    alias=node.alias.value if node.alias else None,
                    selections=selections_from_ast(node.selection_set),
                    source_location=source_location,
                )
            )
        elif isinstance(node, InlineFragmentNode):
            append_selection(
                InlineFragment(
                    type_condition=node.type_condition.name.value
                    if node.type_condition
                    else None,
                    selections=selections_from_ast(node.selection_set),
                    source_location=source_location,
                )
            )
        elif isinstance(node, FragmentSpreadNode):
            append_selection(
                FragmentSpread(name=node.name.value, source_location=source_location)
            )
    return selections


def source_location_from_ast(node: AstNode) -> Optional[SourceLocation]:
    """Get the line and column where the given AST node starts."""
    loc = node.loc
    if not loc:
        return None
    line, column = get_location(loc.source, loc.start)
    return SourceLocation(line, column)

from copy import deepcopy
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from ..pyutils import camel_to_snake
from .location import SourceLocation

if TYPE_CHECKING:
    from ..error import PhaseError  # noqa: F401

__all__ = [
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
]


# Map from node kinds to the attributes holding their child nodes
BLUEPRINT_KEYS: Dict[str, Tuple[str, ...]] = {
    "document": ("operations", "fragments"),
    "operation_definition": ("selections",),
    "named_fragment": ("selections",),
    "field": ("selections",),
    "inline_fragment": ("selections",),
    "fragment_spread": (),
}


# Base Blueprint Node


class Node:
    """Blueprint nodes

    The blueprint is the annotated tree representation of a GraphQL document that is
    passed from phase to phase. Unlike AST nodes, blueprint nodes carry a mutable list
    of errors, which is how phases report problems with a node.
    """

    # allow custom attributes and weak references (not used internally)
    __slots__ = "__dict__", "__weakref__", "source_location", "errors"

    source_location: Optional[SourceLocation]
    errors: List["PhaseError"]

    kind: str = "blueprint"  # the kind of the node as a snake_case string
    keys = ["source_location", "errors"]  # the names of the attributes of this node

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the node with the given keyword arguments."""
        list_keys = BLUEPRINT_KEYS.get(self.kind, ())
        for key in self.keys:
            value = kwargs.get(key)
            if value is None:
                if key == "errors" or key in list_keys:
                    value = []
            elif isinstance(value, tuple) and key != "source_location":
                value = list(value)
            setattr(self, key, value)

    def __repr__(self) -> str:
        """Get a simple representation of the node."""
        rep = self.__class__.__name__
        name = getattr(self, "name", None)
        if name:
            rep = f"{rep} {name!r}"
        location = getattr(self, "source_location", None)
        return f"{rep} at {location}" if location else rep

    def __eq__(self, other: Any) -> bool:
        """Test whether two nodes are equal (recursively)."""
        return (
            isinstance(other, Node)
            and self.__class__ == other.__class__
            and all(getattr(self, key) == getattr(other, key) for key in self.keys)
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = None  # type: ignore

    def __copy__(self) -> "Node":
        """Create a shallow copy of the node."""
        return self.__class__(**{key: getattr(self, key) for key in self.keys})

    def __deepcopy__(self, memo: Dict) -> "Node":
        """Create a deep copy of the node"""
        # noinspection PyArgumentList
        return self.__class__(
            **{key: deepcopy(getattr(self, key), memo) for key in self.keys}
        )

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        cls.kind = camel_to_snake(cls.__name__)
        keys: List[str] = []
        for base in cls.__bases__:
            # noinspection PyUnresolvedReferences
            keys.extend(base.keys)  # type: ignore
        keys.extend(cls.__slots__)
        cls.keys = keys


# Document


class Document(Node):
    __slots__ = "operations", "fragments"

    operations: List["OperationDefinition"]
    fragments: List["NamedFragment"]

    def get_fragment(self, name: str) -> Optional["NamedFragment"]:
        """Get the first fragment with the given name, if there is one."""
        for fragment in self.fragments:
            if fragment.name == name:
                return fragment
        return None


class OperationType(Enum):

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


class OperationDefinition(Node):
    __slots__ = "name", "type", "selections"

    name: Optional[str]
    type: OperationType
    selections: List["Selection"]


class NamedFragment(Node):
    __slots__ = "name", "type_condition", "selections"

    name: str
    type_condition: Optional[str]
    selections: List["Selection"]


# Selections


class Selection(Node):
    __slots__ = ()


class Field(Selection):
    __slots__ = "name", "alias", "selections"

    name: str
    alias: Optional[str]
    selections: List[Selection]


class InlineFragment(Selection):
    __slots__ = "type_condition", "selections"

    type_condition: Optional[str]
    selections: List[Selection]


class FragmentSpread(Selection):
    __slots__ = ("name",)

    name: str

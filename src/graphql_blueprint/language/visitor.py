from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .blueprint import BLUEPRINT_KEYS, Node

__all__ = [
    "Visitor",
    "VisitorAction",
    "visit",
    "BREAK",
    "SKIP",
    "IDLE",
]


class VisitorActionEnum(Enum):
    """Special return values for the visitor methods.

    You can also use the values of this enum directly.
    """

    BREAK = True
    SKIP = False


VisitorAction = Optional[VisitorActionEnum]

BREAK = VisitorActionEnum.BREAK
SKIP = VisitorActionEnum.SKIP
IDLE = None


class Visitor:
    """Visitor that walks through a blueprint.

    Visitors can define two generic methods "enter" and "leave". The former will be
    called when a node is entered in the traversal, the latter is called after visiting
    the node and its child nodes. These methods have the following signature::

        def enter(self, node, key, parent, path, ancestors):
            # The return value has the following meaning:
            # IDLE (None): no action
            # SKIP: skip visiting the child nodes of this node
            # BREAK: stop visiting altogether
            return

        def leave(self, node, key, parent, path, ancestors):
            # The return value has the following meaning:
            # IDLE (None) or SKIP: no action
            # BREAK: stop visiting altogether
            return

    The parameters have the following meaning:

    :arg node: The current node being visiting.
    :arg key: The index or key to this node from the parent node or list.
    :arg parent: the parent immediately above this node, which may be a list.
    :arg path: The key path to get to this node from the root node.
    :arg ancestors: All nodes and lists visited before reaching parent of this node.

    You can also define node kind specific methods by suffixing them with an underscore
    followed by the kind of the node to be visited. For instance, to visit
    ``fragment_spread`` nodes, you would define the methods
    ``enter_fragment_spread()`` and/or ``leave_fragment_spread()``, with the same
    signature as above. If no kind specific method has been defined for a given node,
    the generic method is called.

    Unlike the visitor for GraphQL ASTs, a blueprint visitor cannot edit the tree.
    Phases return modified copies of the nodes they want to change instead.
    """

    # Provide special return values as attributes
    BREAK, SKIP, IDLE = BREAK, SKIP, IDLE

    def __init_subclass__(cls) -> None:
        """Verify that all defined handlers are valid."""
        super().__init_subclass__()
        for attr in cls.__dict__:
            if attr.startswith("_"):
                continue
            method, _, kind = attr.partition("_")
            if method in ("enter", "leave") and kind and kind not in BLUEPRINT_KEYS:
                raise TypeError(f"Invalid blueprint node kind: {kind}.")

    def get_visit_fn(self, kind: str, is_leaving: bool = False) -> Optional[Callable]:
        """Get the visit function for the given node kind and direction."""
        method = "leave" if is_leaving else "enter"
        visit_fn = getattr(self, f"{method}_{kind}", None)
        if not visit_fn:
            visit_fn = getattr(self, method, None)
        return visit_fn


def visit(
    root: Node,
    visitor: Visitor,
    visitor_keys: Optional[Dict[str, Tuple[str, ...]]] = None,
) -> None:
    """Visit each node in a blueprint.

    :func:`~.visit` will walk through a blueprint using a depth-first traversal,
    calling the visitor's enter methods at each node in the traversal, and calling the
    leave methods after visiting that node and all of its child nodes.

    By returning different values from the enter and leave methods, the behavior of the
    visitor can be altered, including skipping over a sub-tree of the blueprint (by
    returning :data:`~.SKIP`), or to stop the whole traversal by returning
    :data:`~.BREAK`.

    To customize the node attributes to be used for traversal, you can provide a
    dictionary visitor_keys mapping node kinds to node attributes.
    """
    if not isinstance(root, Node):
        raise TypeError(f"Not a blueprint Node: {root!r}.")
    if not isinstance(visitor, Visitor):
        raise TypeError(f"Not a blueprint Visitor: {visitor!r}.")
    if visitor_keys is None:
        visitor_keys = BLUEPRINT_KEYS
    path: List[Union[int, str]] = []
    ancestors: List[Any] = []

    def walk(node: Any, key: Union[int, str, None], parent: Any) -> bool:
        """Walk through the given node and return whether to continue."""
        if not isinstance(node, Node):
            raise TypeError(f"Invalid blueprint Node: {node!r}.")
        enter_fn = visitor.get_visit_fn(node.kind)
        if enter_fn:
            result = enter_fn(node, key, parent, path, ancestors)
            if result is BREAK or result is True:
                return False
            if result is SKIP or result is False:
                return True

        if parent is not None:
            ancestors.append(parent)
        for attr in visitor_keys.get(node.kind, ()):  # type: ignore
            value = getattr(node, attr, None)
            if value is None:
                continue
            path.append(attr)
            if isinstance(value, list):
                ancestors.append(node)
                for index, item in enumerate(value):
                    path.append(index)
                    if not walk(item, index, value):
                        return False
                    path.pop()
                ancestors.pop()
            elif not walk(value, attr, node):
                return False
            path.pop()
        if parent is not None:
            ancestors.pop()

        leave_fn = visitor.get_visit_fn(node.kind, is_leaving=True)
        if leave_fn:
            result = leave_fn(node, key, parent, path, ancestors)
            if result is BREAK or result is True:
                return False
        return True

    walk(root, None, None)

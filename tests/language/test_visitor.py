from pytest import raises

from graphql_blueprint.language import (
    BREAK,
    SKIP,
    Document,
    Field,
    FragmentSpread,
    InlineFragment,
    NamedFragment,
    Node,
    Visitor,
    parse_blueprint,
    visit,
)


def check_visitor_fn_args(root, node, key, parent, path, ancestors):
    assert isinstance(node, Node)

    is_root = key is None
    if is_root:
        assert node is root
        assert parent is None
        assert path == []
        assert ancestors == []
        return

    assert isinstance(key, (int, str))

    if isinstance(key, int):
        assert isinstance(parent, list)
        assert 0 <= key < len(parent)
        assert parent[key] is node
    else:
        assert isinstance(parent, Node)
        assert getattr(parent, key) is node

    assert isinstance(path, list)
    assert path[-1] == key

    assert isinstance(ancestors, list)
    assert len(ancestors) == len(path) - 1

    current_node = root
    for i, ancestor in enumerate(ancestors):
        assert ancestor is current_node
        k = path[i]
        if isinstance(k, int):
            current_node = current_node[k]
        else:
            current_node = getattr(current_node, k)
    assert parent is current_node


def describe_visitor():
    def visit_with_invalid_node():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            visit("invalid", Visitor())  # type: ignore
        assert str(exc_info.value) == "Not a blueprint Node: 'invalid'."

    def visit_with_invalid_visitor():
        document = Document()

        class TestVisitor:
            def enter(self, *_args):
                pass

        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            visit(document, TestVisitor())  # type: ignore
        assert str(exc_info.value).startswith("Not a blueprint Visitor:")

    def visit_with_invalid_child_node():
        fragment = NamedFragment(name="Frag", selections=["invalid"])
        with raises(TypeError) as exc_info:
            visit(fragment, Visitor())
        assert str(exc_info.value) == "Invalid blueprint Node: 'invalid'."

    def visitors_with_invalid_node_kind():
        with raises(TypeError) as exc_info:
            # noinspection PyUnusedLocal
            class VisitorWithInvalidKind(Visitor):
                def enter_fragment(self, *_args):
                    pass

        assert str(exc_info.value) == "Invalid blueprint node kind: fragment."

    def visitors_support_all_method_variants():
        class TestVisitor(Visitor):
            def enter(self, node, *args):
                assert len(args) == 4
                visited.append(f"enter:{node.kind}")

            def leave(self, node, *args):
                assert len(args) == 4
                visited.append(f"leave:{node.kind}")

            def enter_fragment_spread(self, node, *args):
                assert len(args) == 4
                visited.append(f"enter_spread:{node.name}")

            def leave_fragment_spread(self, node, *args):
                assert len(args) == 4
                visited.append(f"leave_spread:{node.name}")

        visited = []
        fragment = NamedFragment(
            name="A", selections=[Field(name="a"), FragmentSpread(name="B")]
        )
        visit(fragment, TestVisitor())
        assert visited == [
            "enter:named_fragment",
            "enter:field",
            "leave:field",
            "enter_spread:B",
            "leave_spread:B",
            "leave:named_fragment",
        ]

    def validates_path_argument_and_ancestors():
        root = parse_blueprint(
            """
            query { a { ...A } }
            fragment A on T { ... on T { b { ...B } } }
            """
        )
        visited = []

        class TestVisitor(Visitor):
            @staticmethod
            def enter(node, key, parent, path, ancestors):
                check_visitor_fn_args(root, node, key, parent, path, ancestors)
                visited.append(["enter", *path])

            @staticmethod
            def leave(node, key, parent, path, ancestors):
                check_visitor_fn_args(root, node, key, parent, path, ancestors)
                visited.append(["leave", *path])

        visit(root, TestVisitor())
        assert visited == [
            ["enter"],
            ["enter", "operations", 0],
            ["enter", "operations", 0, "selections", 0],
            ["enter", "operations", 0, "selections", 0, "selections", 0],
            ["leave", "operations", 0, "selections", 0, "selections", 0],
            ["leave", "operations", 0, "selections", 0],
            ["leave", "operations", 0],
            ["enter", "fragments", 0],
            ["enter", "fragments", 0, "selections", 0],
            ["enter", "fragments", 0, "selections", 0, "selections", 0],
            [
                "enter",
                "fragments",
                0,
                "selections",
                0,
                "selections",
                0,
                "selections",
                0,
            ],
            [
                "leave",
                "fragments",
                0,
                "selections",
                0,
                "selections",
                0,
                "selections",
                0,
            ],
            ["leave", "fragments", 0, "selections", 0, "selections", 0],
            ["leave", "fragments", 0, "selections", 0],
            ["leave", "fragments", 0],
            ["leave"],
        ]

    def allows_skipping_a_sub_tree():
        visited = []

        class TestVisitor(Visitor):
            def enter(self, node, *_args):
                visited.append(["enter", node.kind])
                if node.kind == "inline_fragment":
                    return SKIP

            def leave(self, node, *_args):
                visited.append(["leave", node.kind])

        fragment = NamedFragment(
            name="A",
            selections=[
                InlineFragment(selections=[FragmentSpread(name="B")]),
                Field(name="c"),
            ],
        )
        visit(fragment, TestVisitor())
        assert visited == [
            ["enter", "named_fragment"],
            ["enter", "inline_fragment"],
            ["enter", "field"],
            ["leave", "field"],
            ["leave", "named_fragment"],
        ]

    def allows_early_exit_while_visiting():
        visited = []

        class TestVisitor(Visitor):
            def enter(self, node, *_args):
                visited.append(["enter", node.kind])
                if node.kind == "fragment_spread":
                    return BREAK

            def leave(self, node, *_args):
                visited.append(["leave", node.kind])

        fragment = NamedFragment(
            name="A",
            selections=[
                Field(name="a", selections=[FragmentSpread(name="B")]),
                Field(name="c"),
            ],
        )
        visit(fragment, TestVisitor())
        assert visited == [
            ["enter", "named_fragment"],
            ["enter", "field"],
            ["enter", "fragment_spread"],
        ]

    def allows_early_exit_while_leaving():
        visited = []

        class TestVisitor(Visitor):
            def enter(self, node, *_args):
                visited.append(["enter", node.kind])

            def leave(self, node, *_args):
                visited.append(["leave", node.kind])
                if node.kind == "field":
                    return BREAK

        fragment = NamedFragment(
            name="A", selections=[Field(name="a"), Field(name="b")]
        )
        visit(fragment, TestVisitor())
        assert visited == [
            ["enter", "named_fragment"],
            ["enter", "field"],
            ["leave", "field"],
        ]

    def can_use_custom_visitor_keys():
        visited = []

        class TestVisitor(Visitor):
            def enter(self, node, *_args):
                visited.append(node.kind)

        document = Document(
            operations=[Field(name="a")],
            fragments=[NamedFragment(name="A", selections=[Field(name="b")])],
        )
        visit(document, TestVisitor(), {"document": ("fragments",)})
        assert visited == ["document", "named_fragment"]

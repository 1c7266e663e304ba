"""Tests for class sources and nodes."""

import pytest

from classlist.model import ClassMap, ClassNode, LiteralSource, NodeHooks, Resolver, as_source
from classlist.hooks import ClassHook


class TestAsSource:
    def test_string_becomes_literal(self):
        assert as_source("a b") == LiteralSource("a b")

    def test_dict_becomes_class_map(self):
        classes = {"a": True}
        source = as_source(classes)
        assert isinstance(source, ClassMap)
        assert source.classes is classes

    def test_callable_becomes_resolver(self):
        def fn(node, key):
            return "a"

        assert as_source(fn) == Resolver(fn)

    @pytest.mark.parametrize("value", [None, "", {}])
    def test_falsy_becomes_empty_map(self, value):
        assert as_source(value) == ClassMap({})

    def test_existing_source_passes_through(self):
        source = LiteralSource("x")
        assert as_source(source) is source

    def test_unknown_value_treated_as_canonical(self):
        source = as_source(42)
        assert source == ClassMap(42)


class TestPackageExports:
    def test_literal_source_does_not_shadow_typing_literal(self):
        import classlist

        assert "LiteralSource" in classlist.__all__
        assert "Literal" not in classlist.__all__
        assert classlist.LiteralSource is LiteralSource


class TestResolve:
    def test_literal_splits_on_whitespace(self):
        result = LiteralSource("  a   b\tc\n").resolve(None, "input")
        assert result.classes == {"a": True, "b": True, "c": True}

    def test_class_map_resolves_to_itself(self):
        source = ClassMap({"a": False})
        assert source.resolve(None, "input") is source

    def test_resolver_receives_node_and_key(self):
        seen = []

        def fn(node, key):
            seen.append((node, key))
            return {"a": True}

        Resolver(fn).resolve("node", "label")
        assert seen == [("node", "label")]

    def test_resolver_wraps_result(self):
        assert Resolver(lambda n, k: "a").resolve(None, "x") == LiteralSource("a")

    def test_pending_only_for_resolver(self):
        assert Resolver(lambda n, k: None).pending is True
        assert LiteralSource("a").pending is False
        assert ClassMap({}).pending is False


class TestClassNode:
    def test_defaults(self):
        node = ClassNode(name="email")
        assert node.props == {}
        assert isinstance(node.hook, NodeHooks)
        assert isinstance(node.hook.classes, ClassHook)
        assert len(node.hook.classes) == 0

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            ClassNode(name="")

    def test_nodes_do_not_share_hooks(self):
        a = ClassNode(name="a")
        b = ClassNode(name="b")
        a.hook.classes.use(lambda p, c: c)
        assert len(b.hook.classes) == 0

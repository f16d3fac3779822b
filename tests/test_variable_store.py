"""Tests for sprite.core.variable_store — VariableStore."""
from sprite.core.variable_store import VariableStore


class TestVariableStore:
    def test_set_and_get(self):
        vs = VariableStore()
        vs.set("home", 100, 200)
        assert vs.get("home") == (100, 200)

    def test_get_missing(self):
        assert VariableStore().get("missing") is None

    def test_overwrite(self):
        vs = VariableStore()
        vs.set("p", 1, 1)
        vs.set("p", 2, 3)
        assert vs.get("p") == (2, 3)
        assert len(vs) == 1

    def test_contains(self):
        vs = VariableStore()
        vs.set("p", 0, 0)
        assert "p" in vs
        assert "q" not in vs

    def test_as_dict(self):
        vs = VariableStore()
        vs.set("a", 1, 2)
        d = vs.as_dict()
        assert d == {"a": (1, 2)}
        # Returned dict should be a copy
        d["b"] = (9, 9)
        assert vs.get("b") is None

    def test_repr(self):
        vs = VariableStore()
        vs.set("x", 1, 2)
        assert "VariableStore" in repr(vs)
        assert "'x'" in repr(vs)

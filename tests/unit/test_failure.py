"""
fluentassert.core.failure 單元測試
驗證 FailureMessage 的空值判斷、merge 與輸出格式。
"""

import pytest

from fluentassert.core.failure import FailureMessage


@pytest.mark.unit
class TestIsEmpty:
    """is_empty"""

    def test_new_message_is_empty(self):
        assert FailureMessage().is_empty()

    def test_reason_makes_non_empty(self):
        assert not FailureMessage("boom").is_empty()

    def test_only_empty_children_is_empty(self):
        """子訊息全部為空（遞迴）時仍視為空"""
        inner = FailureMessage()
        outer = FailureMessage()
        outer.merge("a", inner)
        outer.merge("b", FailureMessage())
        assert outer.is_empty()
        assert outer.children == ()

    def test_nested_reason_makes_non_empty(self):
        inner = FailureMessage()
        inner.merge("deep", FailureMessage("x"))
        outer = FailureMessage()
        outer.merge("inner", inner)
        assert not outer.is_empty()


@pytest.mark.unit
class TestMerge:
    """merge"""

    def test_merge_empty_is_noop(self):
        msg = FailureMessage("reason")
        before = msg.render()
        msg.merge("label", FailureMessage())
        assert msg.render() == before
        assert msg.children == ()

    def test_merge_returns_none(self):
        msg = FailureMessage()
        assert msg.merge("x", FailureMessage("y")) is None

    def test_merge_keeps_call_order(self):
        msg = FailureMessage()
        msg.merge("second", FailureMessage("2"))
        msg.merge("first", FailureMessage("1"))
        msg.merge("third", FailureMessage("3"))
        assert [label for label, _ in msg.children] == ["second", "first", "third"]
        text = msg.render()
        assert text.index("second:") < text.index("first:") < text.index("third:")

    def test_label_appears_once(self):
        msg = FailureMessage()
        msg.merge("only", FailureMessage("x"))
        assert msg.render().count("only:") == 1


@pytest.mark.unit
class TestRender:
    """render / str"""

    def test_reasons_only(self):
        msg = FailureMessage("the objects are not equal", "got: 1", "want: 2")
        assert msg.render() == "the objects are not equal\ngot: 1\nwant: 2"

    def test_empty_renders_empty_string(self):
        assert FailureMessage().render() == ""

    def test_children_indented_and_separated(self):
        msg = FailureMessage("top")
        msg.merge("a", FailureMessage("x"))
        msg.merge("b", FailureMessage("y", "z"))
        assert msg.render() == "top\n\na:\n  x\n\nb:\n  y\n  z"

    def test_children_without_reasons(self):
        msg = FailureMessage()
        msg.merge("a", FailureMessage("x"))
        assert msg.render() == "a:\n  x"

    def test_nested_indentation(self):
        inner = FailureMessage("leaf")
        middle = FailureMessage()
        middle.merge("inner", inner)
        outer = FailureMessage()
        outer.merge("middle", middle)
        assert outer.render() == "middle:\n  inner:\n    leaf"

    def test_multiline_reason_is_indented_in_child(self):
        msg = FailureMessage()
        msg.merge("a", FailureMessage("line1\nline2"))
        assert msg.render() == "a:\n  line1\n  line2"

    def test_render_is_stable(self):
        msg = FailureMessage("r")
        msg.merge("x", FailureMessage("1"))
        assert msg.render() == msg.render()
        assert str(msg) == msg.render()


@pytest.mark.unit
class TestHelpers:
    """prefix / from_lines / __eq__"""

    def test_prefix_does_not_modify_original(self):
        msg = FailureMessage("reason")
        prefixed = msg.prefix("context")
        assert prefixed.render() == "context\nreason"
        assert msg.render() == "reason"

    def test_prefix_keeps_children(self):
        msg = FailureMessage()
        msg.merge("a", FailureMessage("x"))
        assert msg.prefix("ctx").render() == "ctx\n\na:\n  x"

    def test_from_lines(self):
        assert FailureMessage.from_lines(["a", "b"]) == FailureMessage("a", "b")

    def test_equality(self):
        a = FailureMessage("x")
        a.merge("c", FailureMessage("y"))
        b = FailureMessage("x")
        b.merge("c", FailureMessage("y"))
        assert a == b
        assert a != FailureMessage("x")

    def test_repr(self):
        assert repr(FailureMessage()) == "FailureMessage()"
        assert "boom" in repr(FailureMessage("boom"))

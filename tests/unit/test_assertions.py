"""
fluentassert 斷言 API 單元測試
驗證 fluent wrapper 與 finalizer（assert_ / require / assertf / requiref / and_）。
"""

from unittest.mock import MagicMock, patch

import pytest

import fluentassert as f
from fluentassert.core.exceptions import ReporterError


@pytest.fixture
def fake_reporter():
    return MagicMock(spec=["error", "fatal"])


@pytest.mark.unit
class TestWrapperKinds:
    """各 wrapper 只提供對應種類的方法"""

    def test_string_has_contain(self):
        assert f.string("wrong").contain("ok").failure.reasons[0] == (
            "the value does not contain the substring"
        )

    def test_number_has_no_contain(self):
        assert not hasattr(f.number(1), "contain")

    def test_string_has_no_lesser(self):
        assert not hasattr(f.string("a"), "lesser")

    def test_bool_has_only_bool_methods(self):
        wrapper = f.boolean(True)
        assert wrapper.true().passed
        assert not hasattr(wrapper, "deep_equal")

    def test_err_wrapper(self):
        assert f.err(None).no_error().passed
        assert not f.err(ValueError("x")).no_error().passed
        assert f.err(ValueError("x")).error_is(ValueError).passed
        assert f.err(ValueError("x")).error_message("x").passed

    def test_seq_wrapper(self):
        assert f.seq([1, 2, 2]).equivalent([2, 1, 2]).passed
        assert not f.seq([3, 1, 2]).equivalent([2, 3, 4]).passed
        assert f.seq([1, 2]).contain(2).passed
        assert f.seq([]).empty().passed

    def test_mapping_wrapper(self):
        assert f.mapping({"a": 1}).contain_pair("a", 1).passed
        assert f.mapping({"a": 1}).length(1).passed

    def test_number_wrapper(self):
        assert f.number(1).lesser(2).passed
        assert f.number(2).greater_or_equal(2).passed
        assert f.number(0.1 + 0.2).in_delta(0.3, 1e-9).passed
        assert f.number(5).equal(5).passed

    def test_obj_predicates(self):
        assert f.obj([1, 2]).should(lambda xs: len(xs) == 2).passed
        assert f.obj([1, 2]).should_not(lambda xs: len(xs) == 2).failure.reasons[0] == (
            "object meets the predicate criteria"
        )

    def test_each_call_returns_fresh_assertion(self):
        """同一個 wrapper 的多次斷言互不影響"""
        wrapper = f.obj(1)
        failing = wrapper.equal(2)
        passing = wrapper.equal(1)
        assert not failing.passed
        assert passing.passed

    def test_assertion_has_no_chaining_methods(self):
        assertion = f.obj(1).equal(1)
        assert not hasattr(assertion, "equal")

    def test_repr(self):
        assert repr(f.obj(1)) == "FluentObj(1)"
        assert repr(f.string("a")) == "FluentString('a')"


@pytest.mark.unit
class TestFinalizers:
    """assert_ / require 只在失敗時呼叫 reporter 一次"""

    def test_assert_pass_no_call(self, fake_reporter):
        f.obj(1).equal(1).assert_(fake_reporter)
        assert fake_reporter.method_calls == []

    def test_require_pass_no_call(self, fake_reporter):
        f.obj(1).equal(1).require(fake_reporter)
        assert fake_reporter.method_calls == []

    def test_assert_fail_calls_error(self, fake_reporter):
        f.obj(1).equal(2).assert_(fake_reporter)
        fake_reporter.error.assert_called_once_with(
            "the objects are not equal\ngot: 1\nwant: 2"
        )
        fake_reporter.fatal.assert_not_called()

    def test_require_fail_calls_fatal(self, fake_reporter):
        f.string("wrong").contain("ok").require(fake_reporter)
        fake_reporter.fatal.assert_called_once_with(
            "the value does not contain the substring\ngot: 'wrong'\nsubstr: 'ok'"
        )
        fake_reporter.error.assert_not_called()

    def test_assertf_prepends_message(self, fake_reporter):
        f.number(3).should(lambda x: x % 2 == 0).assertf(fake_reporter, "id %d must be even", 3)
        fake_reporter.error.assert_called_once_with(
            "id 3 must be even\nobject does not meet the predicate criteria\ngot: 3"
        )

    def test_requiref_prepends_message(self, fake_reporter):
        f.boolean(False).true().requiref(fake_reporter, "login button")
        text = fake_reporter.fatal.call_args.args[0]
        assert text.splitlines()[0] == "login button"
        assert "the value is false" in text

    def test_message_without_args_is_not_formatted(self, fake_reporter):
        f.obj(1).equal(2).assert_(fake_reporter, "100% wrong")
        assert fake_reporter.error.call_args.args[0].startswith("100% wrong\n")

    @pytest.mark.parametrize("msg, args, first_line", [
        ("%d", ("x",), "%d ('x',)"),
        ("id %s and %s", (1,), "id %s and %s (1,)"),
        ("%(name)s", (1,), "%(name)s (1,)"),
    ])
    def test_mismatched_format_args_still_reported(self, fake_reporter, msg, args, first_line):
        f.obj(1).equal(2).assertf(fake_reporter, msg, *args)
        fake_reporter.error.assert_called_once()
        assert fake_reporter.error.call_args.args[0].splitlines()[0] == first_line

    def test_requiref_mismatched_format_args(self, fake_reporter):
        f.obj(1).equal(2).requiref(fake_reporter, "%d items", "many")
        assert fake_reporter.fatal.call_args.args[0].startswith("%d items ('many',)\n")

    def test_invalid_reporter_raises(self):
        with pytest.raises(ReporterError):
            f.obj(1).equal(2).assert_(object())

    def test_failure_attached_to_allure(self, fake_reporter):
        with patch("fluentassert.core.assertion.attach_text") as attach:
            f.obj(1).equal(2).assert_(fake_reporter)
            f.obj(1).equal(1).assert_(fake_reporter)
        attach.assert_called_once_with("the objects are not equal\ngot: 1\nwant: 2")


@pytest.mark.unit
class TestAnd:
    """and_ 明確組合多個斷言"""

    def test_both_pass(self):
        assert f.number(5).greater(0).and_(f.number(5).lesser(10)).passed

    def test_one_fails(self):
        combined = f.number(50).greater(0).and_(f.number(50).lesser(10))
        assert not combined.passed
        text = combined.failure.render()
        assert text.startswith("assertion 2:")
        assert "assertion 1:" not in text

    def test_both_fail_keep_order(self):
        combined = f.obj(1).equal(2).and_(f.string("a").contain("b")).and_(f.boolean(False).true())
        labels = [label for label, _ in combined.failure.children]
        assert labels == ["assertion 1", "assertion 2", "assertion 3"]

    def test_combined_reports_once(self, fake_reporter):
        f.obj(1).equal(2).and_(f.obj(3).equal(4)).assert_(fake_reporter)
        assert fake_reporter.error.call_count == 1


@pytest.mark.unit
class TestCustomAssertion:
    """以 FailureMessage + merge 自訂組合斷言"""

    def check_user(self, user: dict) -> f.FailureMessage:
        msg = f.FailureMessage()
        msg.merge("name", f.string(user["name"]).not_empty().failure)
        msg.merge("age", f.number(user["age"]).greater(0).failure)
        return msg

    def test_valid_user(self, fake_reporter):
        f.check(self.check_user({"name": "amy", "age": 3})).require(fake_reporter)
        fake_reporter.fatal.assert_not_called()

    def test_invalid_user(self, fake_reporter):
        f.check(self.check_user({"name": "", "age": -1})).assert_(fake_reporter)
        text = fake_reporter.error.call_args.args[0]
        assert text.index("name:") < text.index("age:")
        assert "  the value is empty" in text
        assert "  the value is not greater than the bound" in text

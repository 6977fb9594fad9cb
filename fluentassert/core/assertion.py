"""
Assertion — 已評估斷言的終端 handle

每個 fluent 敘述只做一次斷言，結果就是一個 Assertion；
它只提供 finalizer，不能再接其他斷言。需要組合時用 and_()。

    f.obj(a).equal(b).assert_(reporter)               # 失敗後繼續
    f.obj(a).equal(b).require(reporter)               # 失敗即中止
    f.obj(a).should(is_even).assertf(reporter, "id %s", a)
    f.number(x).greater(0).and_(f.number(x).lesser(10)).require(reporter)
"""

from __future__ import annotations

from fluentassert.core.failure import FailureMessage
from fluentassert.core.reporter import Reporter, ensure_reporter
from fluentassert.utils.allure_helper import attach_text
from fluentassert.utils.logger import logger


class Assertion:
    def __init__(self, failure: FailureMessage | None = None):
        self._parts: list[FailureMessage] = [
            failure if failure is not None else FailureMessage()
        ]

    @property
    def failure(self) -> FailureMessage:
        """
        單一斷言直接回傳其 FailureMessage；
        and_() 組合過的斷言以 "assertion N" 標籤合併各自的失敗。
        """
        if len(self._parts) == 1:
            return self._parts[0]
        combined = FailureMessage()
        for i, part in enumerate(self._parts, 1):
            combined.merge(f"assertion {i}", part)
        return combined

    @property
    def passed(self) -> bool:
        return all(part.is_empty() for part in self._parts)

    def and_(self, other: "Assertion") -> "Assertion":
        """組合兩個斷言，兩者都通過才算通過"""
        combined = Assertion()
        combined._parts = self._parts + other._parts
        return combined

    # ── finalizers ──

    def assert_(self, reporter: Reporter, msg: str = "", *args) -> None:
        """失敗時呼叫 reporter.error()，測試繼續"""
        self._report(reporter, "error", msg, args)

    def require(self, reporter: Reporter, msg: str = "", *args) -> None:
        """失敗時呼叫 reporter.fatal()，由 reporter 中止測試"""
        self._report(reporter, "fatal", msg, args)

    def assertf(self, reporter: Reporter, msg: str, *args) -> None:
        self._report(reporter, "error", msg, args)

    def requiref(self, reporter: Reporter, msg: str, *args) -> None:
        self._report(reporter, "fatal", msg, args)

    def _report(self, reporter: Reporter, method: str, msg: str, args: tuple) -> None:
        reporter = ensure_reporter(reporter)
        if self.passed:
            return
        failure = self.failure
        if msg:
            failure = failure.prefix(_format_msg(msg, args))
        text = failure.render()
        logger.debug(f"斷言失敗 ({method}):\n{text}", extra={"reporter_method": method})
        attach_text(text)
        getattr(reporter, method)(text)

    def __repr__(self) -> str:
        return f"Assertion(passed={self.passed})"


def _format_msg(msg: str, args: tuple) -> str:
    """printf 格式與參數不符時不拋例外，改為直接附上參數"""
    if not args:
        return msg
    try:
        return msg % args
    except (TypeError, ValueError, KeyError):
        return f"{msg} {args!r}"

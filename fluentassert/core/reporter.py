"""
Reporter — 把失敗訊息交給測試執行器

Reporter 只有兩個操作：
    error(text)  — 記錄失敗，測試繼續執行
    fatal(text)  — 記錄失敗並中止目前測試

PytestReporter 是 pytest 版本的實作：fatal 透過 pytest.fail() 中止，
error 先收集起來，測試結束時（或離開 with 區塊時）一次報告。

用法：
    def test_user(reporter):                 # 由 fluentassert.plugin 提供
        f.string(name).contain("ok").assert_(reporter)

    with PytestReporter() as r:              # 不使用 plugin 時
        f.number(1).greater(2).assert_(r)
"""

from __future__ import annotations

from typing import Protocol

import pytest

from fluentassert.core.exceptions import ReporterError
from fluentassert.core.failure import INDENT


class Reporter(Protocol):
    def error(self, text: str) -> None: ...

    def fatal(self, text: str) -> None: ...


def ensure_reporter(reporter: object) -> Reporter:
    for name in ("error", "fatal"):
        if not callable(getattr(reporter, name, None)):
            raise ReporterError(reporter)
    return reporter


class PytestReporter:
    """pytest 版 Reporter：fatal 立即失敗，error 收集到最後"""

    def __init__(self):
        self._failures: list[str] = []

    def error(self, text: str) -> None:
        self._failures.append(text)

    def fatal(self, text: str) -> None:
        pytest.fail(text, pytrace=False)

    @property
    def failures(self) -> list[str]:
        return list(self._failures)

    @property
    def failed(self) -> bool:
        return bool(self._failures)

    def summary(self) -> str:
        lines = [f"{len(self._failures)} assertion(s) failed"]
        for i, text in enumerate(self._failures, 1):
            lines.append("")
            lines.append(f"{i}.")
            lines.extend(INDENT + line if line else line for line in text.splitlines())
        return "\n".join(lines)

    def verify(self) -> None:
        """有收集到失敗時，以一次 pytest.fail 報告全部"""
        if self._failures:
            pytest.fail(self.summary(), pytrace=False)

    def __enter__(self) -> "PytestReporter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # 區塊內已有例外時不覆蓋它
        if exc_type is None:
            self.verify()

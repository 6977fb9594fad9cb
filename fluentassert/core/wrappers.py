"""
Fluent Wrapper — 依受測值種類區分的斷言物件

每種值一個 wrapper 類別，只提供對該種類有意義的斷言方法，
例如 contain() 只在 string/seq 上，lesser() 只在 number 上。
每個方法執行一個 comparator，回傳 Assertion（只剩 finalizer 可呼叫）。

用法：
    import fluentassert as f

    f.obj(user).deep_equal(want).require(reporter)
    f.string(title).contain("首頁").assert_(reporter)
    f.number(price).greater(0).assert_(reporter)
    f.seq(ids).equivalent([3, 1, 2]).assert_(reporter)
    f.err(exc).no_error().require(reporter)
"""

from __future__ import annotations

import re
from typing import Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from fluentassert.core import comparators as cmp
from fluentassert.core.assertion import Assertion
from fluentassert.core.failure import FailureMessage

T = TypeVar("T")
N = TypeVar("N", int, float)
K = TypeVar("K")
V = TypeVar("V")


class FluentObj(Generic[T]):
    """任意物件"""

    def __init__(self, got: T):
        self.got = got

    def equal(self, want: T) -> Assertion:
        return Assertion(cmp.equal(self.got, want))

    def not_equal(self, obj: T) -> Assertion:
        return Assertion(cmp.not_equal(self.got, obj))

    def deep_equal(self, want: T) -> Assertion:
        """遞迴比較欄位/元素，失敗時附上 -want +got diff"""
        return Assertion(cmp.deep_equal(self.got, want))

    def not_deep_equal(self, obj: T) -> Assertion:
        return Assertion(cmp.not_deep_equal(self.got, obj))

    def none(self) -> Assertion:
        return Assertion(cmp.none(self.got))

    def not_none(self) -> Assertion:
        return Assertion(cmp.not_none(self.got))

    def zero(self) -> Assertion:
        return Assertion(cmp.zero(self.got))

    def non_zero(self) -> Assertion:
        return Assertion(cmp.non_zero(self.got))

    def instance_of(self, cls: type | tuple[type, ...]) -> Assertion:
        return Assertion(cmp.instance_of(self.got, cls))

    def should(self, pred: Callable[[T], bool]) -> Assertion:
        """pred(got) 必須為真；搭配 assertf/requiref 補充訊息"""
        return Assertion(cmp.should(self.got, pred))

    def should_not(self, pred: Callable[[T], bool]) -> Assertion:
        return Assertion(cmp.should_not(self.got, pred))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.got!r})"


class FluentString(FluentObj[str]):
    """字串"""

    def contain(self, substr: str) -> Assertion:
        return Assertion(cmp.contain_substr(self.got, substr))

    def not_contain(self, substr: str) -> Assertion:
        return Assertion(cmp.not_contain_substr(self.got, substr))

    def has_prefix(self, prefix: str) -> Assertion:
        return Assertion(cmp.has_prefix(self.got, prefix))

    def has_suffix(self, suffix: str) -> Assertion:
        return Assertion(cmp.has_suffix(self.got, suffix))

    def equal_fold(self, want: str) -> Assertion:
        return Assertion(cmp.equal_fold(self.got, want))

    def match_regex(self, pattern: str | re.Pattern) -> Assertion:
        return Assertion(cmp.match_regex(self.got, pattern))

    def empty(self) -> Assertion:
        return Assertion(cmp.empty(self.got))

    def not_empty(self) -> Assertion:
        return Assertion(cmp.not_empty(self.got))

    def length(self, want: int) -> Assertion:
        return Assertion(cmp.length(self.got, want))


class FluentNumber(FluentObj[N]):
    """數值（int / float，或任何可排序的值）"""

    def lesser(self, bound: N) -> Assertion:
        return Assertion(cmp.lesser(self.got, bound))

    def greater(self, bound: N) -> Assertion:
        return Assertion(cmp.greater(self.got, bound))

    def lesser_or_equal(self, bound: N) -> Assertion:
        return Assertion(cmp.lesser_or_equal(self.got, bound))

    def greater_or_equal(self, bound: N) -> Assertion:
        return Assertion(cmp.greater_or_equal(self.got, bound))

    def in_delta(self, want: N, delta: float) -> Assertion:
        return Assertion(cmp.in_delta(self.got, want, delta))


class FluentBool:
    """布林值"""

    def __init__(self, got: bool):
        self.got = got

    def true(self) -> Assertion:
        return Assertion(cmp.true(self.got))

    def false(self) -> Assertion:
        return Assertion(cmp.false(self.got))

    def equal(self, want: bool) -> Assertion:
        return Assertion(cmp.equal(self.got, want))

    def should(self, pred: Callable[[bool], bool]) -> Assertion:
        return Assertion(cmp.should(self.got, pred))

    def __repr__(self) -> str:
        return f"FluentBool({self.got!r})"


class FluentSeq(FluentObj[Sequence[T]]):
    """有序序列（list、tuple …）"""

    def equivalent(self, want: Iterable[T]) -> Assertion:
        """忽略順序，重複次數必須相同"""
        return Assertion(cmp.equivalent(self.got, want))

    def not_equivalent(self, obj: Iterable[T]) -> Assertion:
        return Assertion(cmp.not_equivalent(self.got, obj))

    def contain(self, item: T) -> Assertion:
        return Assertion(cmp.contain(self.got, item))

    def not_contain(self, item: T) -> Assertion:
        return Assertion(cmp.not_contain(self.got, item))

    def empty(self) -> Assertion:
        return Assertion(cmp.empty(self.got))

    def not_empty(self) -> Assertion:
        return Assertion(cmp.not_empty(self.got))

    def length(self, want: int) -> Assertion:
        return Assertion(cmp.length(self.got, want))


class FluentMapping(FluentObj[Mapping[K, V]]):
    """dict 等 mapping"""

    def contain_key(self, key: K) -> Assertion:
        return Assertion(cmp.contain_key(self.got, key))

    def not_contain_key(self, key: K) -> Assertion:
        return Assertion(cmp.not_contain_key(self.got, key))

    def contain_pair(self, key: K, value: V) -> Assertion:
        return Assertion(cmp.contain_pair(self.got, key, value))

    def empty(self) -> Assertion:
        return Assertion(cmp.empty(self.got))

    def not_empty(self) -> Assertion:
        return Assertion(cmp.not_empty(self.got))

    def length(self, want: int) -> Assertion:
        return Assertion(cmp.length(self.got, want))


class FluentErr:
    """例外物件或 None（None 代表沒有錯誤）"""

    def __init__(self, got: BaseException | None):
        self.got = got

    def no_error(self) -> Assertion:
        return Assertion(cmp.no_error(self.got))

    def error(self) -> Assertion:
        return Assertion(cmp.error(self.got))

    def error_is(self, target: BaseException | type) -> Assertion:
        return Assertion(cmp.error_is(self.got, target))

    def error_message(self, want: str) -> Assertion:
        return Assertion(cmp.error_message(self.got, want))

    def __repr__(self) -> str:
        return f"FluentErr({self.got!r})"


# ── 建構函式 ──

def obj(got: T) -> FluentObj[T]:
    return FluentObj(got)


def string(got: str) -> FluentString:
    return FluentString(got)


def number(got: N) -> FluentNumber[N]:
    return FluentNumber(got)


def boolean(got: bool) -> FluentBool:
    return FluentBool(got)


def seq(got: Sequence[T]) -> FluentSeq[T]:
    return FluentSeq(got)


def mapping(got: Mapping[K, V]) -> FluentMapping[K, V]:
    return FluentMapping(got)


def err(got: BaseException | None) -> FluentErr:
    return FluentErr(got)


def check(failure: FailureMessage) -> Assertion:
    """把自訂斷言函式回傳的 FailureMessage 包成 Assertion 以便 finalize"""
    return Assertion(failure)

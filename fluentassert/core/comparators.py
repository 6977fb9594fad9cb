"""
Comparator 策略 — 每種斷言一個純函式

每個函式接受 got（與預期值），回傳 FailureMessage：空代表通過。
比較運算本身拋出例外（None、型別不符、無法比較等）時，
由 @comparator 轉成失敗原因，不向外傳遞。

新增斷言種類只需要寫一個 (got, want) -> FailureMessage 函式並加上 @comparator，
再在 wrappers.py 對應的 wrapper 上加一個方法。
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import math
import re
from typing import Any, Callable, Iterable, Mapping

from fluentassert.core.failure import FailureMessage
from fluentassert.utils.formatting import diff_lines, format_value, structure


def _line(name: str, value: Any) -> str:
    return f"{name}: {format_value(value)}"


def _pair(got_name: str, got: Any, want_name: str, want: Any) -> tuple[str, str]:
    """兩個值一起顯示，過長時截斷在第一個不同處附近"""
    return (
        f"{got_name}: {format_value(got, other=want)}",
        f"{want_name}: {format_value(want, other=got)}",
    )


def comparator(func: Callable[..., FailureMessage]) -> Callable[..., FailureMessage]:
    """
    比較過程拋出的例外轉成失敗訊息，並列出所有參數。

    用法:
        @comparator
        def has_prefix(got: str, prefix: str) -> FailureMessage: ...
    """
    names = list(inspect.signature(func).parameters)

    @functools.wraps(func)
    def wrapper(*args):
        try:
            return func(*args)
        except Exception as e:
            return FailureMessage(
                f"the objects cannot be compared: {type(e).__name__}: {e}",
                *(_line(name, value) for name, value in zip(names, args)),
            )
    return wrapper


# ── 相等 ──

@comparator
def equal(got: Any, want: Any) -> FailureMessage:
    if got == want:
        return FailureMessage()
    return FailureMessage("the objects are not equal", *_pair("got", got, "want", want))


@comparator
def not_equal(got: Any, obj: Any) -> FailureMessage:
    if got != obj:
        return FailureMessage()
    return FailureMessage("the objects are equal", _line("got", got))


def _deep_eq(got: Any, want: Any) -> bool:
    return bool(structure(got) == structure(want))


@comparator
def deep_equal(got: Any, want: Any) -> FailureMessage:
    """結構相等；失敗時輸出 -want +got 的 unified diff"""
    if _deep_eq(got, want):
        return FailureMessage()
    diff = diff_lines(want, got)
    if diff:
        return FailureMessage("mismatch (-want +got):", *diff)
    # 列印結果相同但值不相等（例如 nan、同名的不同型別）
    reasons = ["the objects are not equal", *_pair("got", got, "want", want)]
    if type(got) is not type(want):
        reasons.append(f"got type: {_type_name(got)}")
        reasons.append(f"want type: {_type_name(want)}")
    return FailureMessage(*reasons)


def _type_name(value: Any) -> str:
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


@comparator
def not_deep_equal(got: Any, obj: Any) -> FailureMessage:
    if not _deep_eq(got, obj):
        return FailureMessage()
    return FailureMessage("the objects are equal", _line("got", got))


# ── 集合 ──

def _multiset_diff(got: Iterable, want: Iterable) -> tuple[list, list]:
    """回傳 (extra, missing)；以 == 逐一配對，不需要元素可 hash"""
    remaining = list(want)
    extra = []
    for item in got:
        for i, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[i]
                break
        else:
            extra.append(item)
    return extra, remaining


@comparator
def equivalent(got: Iterable, want: Iterable) -> FailureMessage:
    """忽略順序、但重複次數必須相同"""
    got, want = list(got), list(want)
    extra, missing = _multiset_diff(got, want)
    if not extra and not missing:
        return FailureMessage()
    reasons = ["the collections are not equivalent", _line("got", got), _line("want", want)]
    if extra:
        reasons.append(_line("extra elements", extra))
    if missing:
        reasons.append(_line("missing elements", missing))
    return FailureMessage(*reasons)


@comparator
def not_equivalent(got: Iterable, obj: Iterable) -> FailureMessage:
    got, obj = list(got), list(obj)
    extra, missing = _multiset_diff(got, obj)
    if extra or missing:
        return FailureMessage()
    return FailureMessage("the collections are equivalent", _line("got", got))


@comparator
def contain(got: Iterable, item: Any) -> FailureMessage:
    if item in got:
        return FailureMessage()
    return FailureMessage(
        "the object does not contain the element", _line("got", got), _line("element", item),
    )


@comparator
def not_contain(got: Iterable, item: Any) -> FailureMessage:
    if item not in got:
        return FailureMessage()
    return FailureMessage(
        "the object contains the element", _line("got", got), _line("element", item),
    )


@comparator
def empty(got: Any) -> FailureMessage:
    if len(got) == 0:
        return FailureMessage()
    return FailureMessage("the value is not empty", _line("got", got))


@comparator
def not_empty(got: Any) -> FailureMessage:
    if len(got) > 0:
        return FailureMessage()
    return FailureMessage("the value is empty", _line("got", got))


@comparator
def length(got: Any, want: int) -> FailureMessage:
    actual = len(got)
    if actual == want:
        return FailureMessage()
    return FailureMessage(
        "the length is not as expected", _line("got", got),
        _line("got length", actual), _line("want length", want),
    )


@comparator
def contain_key(got: Mapping, key: Any) -> FailureMessage:
    if key in got:
        return FailureMessage()
    return FailureMessage("the mapping does not contain the key", _line("got", got), _line("key", key))


@comparator
def not_contain_key(got: Mapping, key: Any) -> FailureMessage:
    if key not in got:
        return FailureMessage()
    return FailureMessage("the mapping contains the key", _line("got", got), _line("key", key))


@comparator
def contain_pair(got: Mapping, key: Any, value: Any) -> FailureMessage:
    if key not in got:
        return FailureMessage("the mapping does not contain the key", _line("got", got), _line("key", key))
    if got[key] == value:
        return FailureMessage()
    return FailureMessage(
        "the mapping contains the key with a different value",
        _line("key", key), *_pair("got value", got[key], "want value", value),
    )


# ── 字串 ──

def _require_str(**values: Any) -> FailureMessage:
    """參數不是 str 時回傳失敗原因"""
    for name, value in values.items():
        if not isinstance(value, str):
            return FailureMessage(
                f"the objects cannot be compared: {name} is not a string",
                _line(name, value), f"{name} type: {type(value).__name__}",
            )
    return FailureMessage()


@comparator
def contain_substr(got: str, substr: str) -> FailureMessage:
    invalid = _require_str(got=got, substr=substr)
    if not invalid.is_empty():
        return invalid
    if substr in got:
        return FailureMessage()
    return FailureMessage(
        "the value does not contain the substring", _line("got", got), _line("substr", substr),
    )


@comparator
def not_contain_substr(got: str, substr: str) -> FailureMessage:
    invalid = _require_str(got=got, substr=substr)
    if not invalid.is_empty():
        return invalid
    if substr not in got:
        return FailureMessage()
    return FailureMessage(
        "the value contains the substring", _line("got", got), _line("substr", substr),
    )


@comparator
def has_prefix(got: str, prefix: str) -> FailureMessage:
    invalid = _require_str(got=got, prefix=prefix)
    if not invalid.is_empty():
        return invalid
    if got.startswith(prefix):
        return FailureMessage()
    return FailureMessage("the value does not have the prefix", _line("got", got), _line("prefix", prefix))


@comparator
def has_suffix(got: str, suffix: str) -> FailureMessage:
    invalid = _require_str(got=got, suffix=suffix)
    if not invalid.is_empty():
        return invalid
    if got.endswith(suffix):
        return FailureMessage()
    return FailureMessage("the value does not have the suffix", _line("got", got), _line("suffix", suffix))


@comparator
def equal_fold(got: str, want: str) -> FailureMessage:
    """不分大小寫的字串相等"""
    invalid = _require_str(got=got, want=want)
    if not invalid.is_empty():
        return invalid
    if got.casefold() == want.casefold():
        return FailureMessage()
    return FailureMessage(
        "the strings are not equal under case-folding", *_pair("got", got, "want", want),
    )


@comparator
def match_regex(got: str, pattern: str | re.Pattern) -> FailureMessage:
    invalid = _require_str(got=got)
    if not invalid.is_empty():
        return invalid
    try:
        regex = re.compile(pattern)
    except re.error as e:
        return FailureMessage(f"invalid regular expression: {e}", _line("pattern", pattern))
    if regex.search(got):
        return FailureMessage()
    return FailureMessage(
        "the string value does not match the regular expression",
        _line("got", got), _line("regex", regex.pattern),
    )


# ── 數值 ──

def _ordering(got: Any, bound: Any, op: Callable[[Any, Any], bool], wording: str) -> FailureMessage:
    try:
        if op(got, bound):
            return FailureMessage()
    except TypeError as e:
        return FailureMessage(
            f"the values cannot be ordered: {e}", _line("got", got), _line("bound", bound),
        )
    return FailureMessage(f"the value is not {wording} the bound", _line("got", got), _line("bound", bound))


@comparator
def lesser(got: Any, bound: Any) -> FailureMessage:
    return _ordering(got, bound, lambda a, b: a < b, "lesser than")


@comparator
def greater(got: Any, bound: Any) -> FailureMessage:
    return _ordering(got, bound, lambda a, b: a > b, "greater than")


@comparator
def lesser_or_equal(got: Any, bound: Any) -> FailureMessage:
    return _ordering(got, bound, lambda a, b: a <= b, "lesser than or equal to")


@comparator
def greater_or_equal(got: Any, bound: Any) -> FailureMessage:
    return _ordering(got, bound, lambda a, b: a >= b, "greater than or equal to")


@comparator
def in_delta(got: float, want: float, delta: float) -> FailureMessage:
    if math.isnan(got) or math.isnan(want):
        return FailureMessage("the values cannot be compared: NaN", _line("got", got), _line("want", want))
    if abs(got - want) <= delta:
        return FailureMessage()
    return FailureMessage(
        "the value is not within the delta",
        _line("got", got), _line("want", want), _line("delta", delta),
    )


# ── 布林 ──

@comparator
def true(got: Any) -> FailureMessage:
    if got is True:
        return FailureMessage()
    return FailureMessage("the value is false", _line("got", got))


@comparator
def false(got: Any) -> FailureMessage:
    if got is False:
        return FailureMessage()
    return FailureMessage("the value is true", _line("got", got))


# ── None / zero / 型別 ──

@comparator
def none(got: Any) -> FailureMessage:
    if got is None:
        return FailureMessage()
    return FailureMessage("the value is not None", _line("got", got))


@comparator
def not_none(got: Any) -> FailureMessage:
    if got is not None:
        return FailureMessage()
    return FailureMessage("the value is None")


@comparator
def zero(got: Any) -> FailureMessage:
    """零值：None、內建數值/字串/容器的空值，或所有欄位皆為零值/預設值的 dataclass"""
    if _is_zero(got):
        return FailureMessage()
    return FailureMessage("the value is not a zero value", _line("got", got))


@comparator
def non_zero(got: Any) -> FailureMessage:
    if not _is_zero(got):
        return FailureMessage()
    return FailureMessage("the value is a zero value", _line("got", got))


_ZERO_TYPES = (bool, int, float, complex, str, bytes, list, tuple, dict, set, frozenset)


def _is_zero(value: Any) -> bool:
    """不建立任何新物件；其他型別一律不是零值"""
    if value is None:
        return True
    if isinstance(value, _ZERO_TYPES):
        return not value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        for f in dataclasses.fields(value):
            current = getattr(value, f.name)
            if f.default is not dataclasses.MISSING:
                if current != f.default:
                    return False
            elif not _is_zero(current):
                return False
        return True
    return False


@comparator
def instance_of(got: Any, cls: type | tuple[type, ...]) -> FailureMessage:
    if isinstance(got, cls):
        return FailureMessage()
    return FailureMessage(
        "the object is not an instance of the type",
        _line("got", got), f"got type: {type(got).__name__}", _line("want type", cls),
    )


# ── 錯誤 ──

@comparator
def no_error(err: BaseException | None) -> FailureMessage:
    if err is None:
        return FailureMessage()
    return FailureMessage("non-None error:", f"error: {type(err).__name__}: {err}")


@comparator
def error(err: BaseException | None) -> FailureMessage:
    if err is not None:
        return FailureMessage()
    return FailureMessage("the error is None")


@comparator
def error_is(err: BaseException | None, target: BaseException | type) -> FailureMessage:
    """target 為例外類別時以 isinstance 判斷，為例外物件時以 is 判斷；會沿著 __cause__ 往下找"""
    current = err
    while current is not None:
        if isinstance(target, type):
            if isinstance(current, target):
                return FailureMessage()
        elif current is target:
            return FailureMessage()
        current = current.__cause__
    return FailureMessage(
        "the error does not match the target", _line("got", err), _line("target", target),
    )


@comparator
def error_message(err: BaseException | None, want: str) -> FailureMessage:
    if err is None:
        return FailureMessage("the error is None", _line("want message", want))
    if str(err) == want:
        return FailureMessage()
    return FailureMessage(
        "the error message is not equal", *_pair("got", str(err), "want", want),
    )


# ── Predicate ──

def should(got: Any, pred: Callable[[Any], bool]) -> FailureMessage:
    try:
        if pred(got):
            return FailureMessage()
    except Exception as e:
        return FailureMessage(f"the predicate raised: {type(e).__name__}: {e}", _line("got", got))
    return FailureMessage("object does not meet the predicate criteria", _line("got", got))


def should_not(got: Any, pred: Callable[[Any], bool]) -> FailureMessage:
    try:
        if not pred(got):
            return FailureMessage()
    except Exception as e:
        return FailureMessage(f"the predicate raised: {type(e).__name__}: {e}", _line("got", got))
    return FailureMessage("object meets the predicate criteria", _line("got", got))

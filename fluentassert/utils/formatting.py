"""
值的顯示與結構化 diff

失敗訊息中的 got/want 都經過 format_value()；
deep_equal 的差異由 diff_lines() 以 unified diff（-want +got）呈現。
pprint 會排序 dict key 與 set 元素，所以輸出是穩定的。
"""

from __future__ import annotations

import dataclasses
import difflib
import enum
import functools
import keyword
import os
import pprint
from typing import Any

from fluentassert.config.config import Config

DIFF_WIDTH = 40
ELLIPSIS = "..."

_MISSING = object()


def _text(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return pprint.pformat(value, width=DIFF_WIDTH * 2)


def format_value(value: Any, other: Any = _MISSING) -> str:
    """
    回傳適合放進失敗訊息的字串表示，過長時截斷。

    有 other 時，截斷視窗會包含與 other 第一個不同的位置，
    讓 got/want 兩行在共同前綴很長時仍看得出差異。
    """
    text = _text(value)
    limit = Config.REPR_MAX
    if len(text) <= limit:
        return text
    start = 0
    if other is not _MISSING:
        first_diff = len(os.path.commonprefix([text, _text(other)]))
        if first_diff >= limit - len(ELLIPSIS):
            start = first_diff - limit // 2
    window = text[start:start + limit]
    head = ELLIPSIS if start > 0 else ""
    tail = ELLIPSIS if start + limit < len(text) else ""
    return head + window + tail


@functools.lru_cache(maxsize=None)
def _shape_class(cls: type, field_names: tuple[str, ...]) -> type:
    # 以原型別為 key：同名但不同的型別會得到不同的 class，彼此不相等
    return dataclasses.make_dataclass(cls.__name__, field_names)


def _is_plain_object(value: Any) -> bool:
    """沒有自訂 __eq__、屬性名稱都能當欄位名的一般物件"""
    if isinstance(value, (type, enum.Enum, BaseException)) or callable(value):
        return False
    if not hasattr(value, "__dict__") or type(value).__eq__ is not object.__eq__:
        return False
    return all(
        isinstance(name, str) and name.isidentifier() and not keyword.iskeyword(name)
        for name in vars(value)
    )


def structure(value: Any) -> Any:
    """
    將值轉成可比較、可穩定列印的結構。

    dataclass 與沒有自訂 __eq__ 的一般物件會轉成同名的 dataclass，
    欄位遞迴處理；list/tuple/dict 逐項處理，其餘原樣回傳。
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = tuple(f.name for f in dataclasses.fields(value))
        cls = _shape_class(type(value), names)
        return cls(*(structure(getattr(value, n)) for n in names))
    if isinstance(value, dict):
        return {k: structure(v) for k, v in value.items()}
    if isinstance(value, list):
        return [structure(v) for v in value]
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return tuple(structure(v) for v in value)
    if _is_plain_object(value):
        attrs = vars(value)
        cls = _shape_class(type(value), tuple(attrs))
        return cls(*(structure(v) for v in attrs.values()))
    return value


def diff_lines(want: Any, got: Any) -> list[str]:
    """以 unified diff 比較兩個值的 pprint 輸出，"-" 為 want、"+" 為 got"""
    want_lines = pprint.pformat(structure(want), width=DIFF_WIDTH).splitlines()
    got_lines = pprint.pformat(structure(got), width=DIFF_WIDTH).splitlines()
    return list(difflib.unified_diff(
        want_lines, got_lines,
        fromfile="want", tofile="got",
        n=Config.DIFF_CONTEXT, lineterm="",
    ))

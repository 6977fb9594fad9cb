"""
FailureMessage — 可合併的階層式失敗訊息

空訊息代表成功，非空代表失敗；這是整個函式庫唯一的成功/失敗訊號。

用法：
    from fluentassert.core.failure import FailureMessage

    def check_user(user) -> FailureMessage:
        msg = FailureMessage()
        msg.merge("name", f.string(user.name).not_empty().failure)
        msg.merge("age", f.number(user.age).greater(0).failure)
        return msg

輸出格式：
    the objects are not equal
    got: 1
    want: 2

    name:
      the value is empty
"""

from __future__ import annotations

from typing import Iterable

INDENT = "  "


class FailureMessage:
    """零到多個失敗原因，以及依呼叫順序排列的具名子訊息"""

    def __init__(self, *reasons: str):
        self._reasons: list[str] = [str(r) for r in reasons]
        self._children: list[tuple[str, FailureMessage]] = []

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "FailureMessage":
        return cls(*lines)

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(self._reasons)

    @property
    def children(self) -> tuple[tuple[str, "FailureMessage"], ...]:
        return tuple(self._children)

    def merge(self, label: str, child: "FailureMessage") -> None:
        """child 非空時，以 label 附加到最後；空訊息不做任何事"""
        if child.is_empty():
            return
        self._children.append((label, child))

    def is_empty(self) -> bool:
        if self._reasons:
            return False
        return all(child.is_empty() for _, child in self._children)

    def prefix(self, text: str) -> "FailureMessage":
        """回傳在最前面加上一行 text 的副本，原訊息不變"""
        clone = FailureMessage(text, *self._reasons)
        clone._children = list(self._children)
        return clone

    def render(self) -> str:
        return "\n".join(self._lines())

    def _lines(self) -> list[str]:
        lines: list[str] = []
        for reason in self._reasons:
            lines.extend(reason.splitlines() or [""])
        for label, child in self._children:
            if lines:
                lines.append("")
            lines.append(f"{label}:")
            lines.extend(INDENT + line if line else line for line in child._lines())
        return lines

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.is_empty():
            return "FailureMessage()"
        return f"FailureMessage({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FailureMessage):
            return NotImplemented
        return self._reasons == other._reasons and self._children == other._children

    __hash__ = None

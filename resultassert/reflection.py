"""
型別比對工具

所有 "of type" 斷言共用同一個型別相等判斷：完全相同才算相同，
子類別不算。
"""

from __future__ import annotations

import typing
from typing import Any

NONE_MARKER = "None"


def _origin(tp: Any) -> Any:
    # list[int] 之類的參數化型別在 runtime 只看得到 list
    return typing.get_origin(tp) or tp


def type_of(value: Any) -> type | None:
    return None if value is None else type(value)


def are_same_types(expected: Any, actual: Any) -> bool:
    if expected is None or actual is None:
        return False
    return _origin(expected) is _origin(actual)


def are_different_types(expected: Any, actual: Any) -> bool:
    """expected 與 actual 不是同一個型別（actual 為 None 一律視為不同）"""
    return not are_same_types(expected, actual)


def type_name(tp: Any) -> str:
    """
    易讀的型別名稱。

    Examples:
        type_name(dict)       -> "dict"
        type_name(list[int])  -> "list[int]"
        type_name(None)       -> "None"
    """
    if tp is None:
        return NONE_MARKER
    if typing.get_origin(tp) is not None:
        args = ", ".join(type_name(arg) for arg in typing.get_args(tp))
        return f"{type_name(typing.get_origin(tp))}[{args}]"
    return getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None) or repr(tp)

from __future__ import annotations

import re
from typing import List, Optional

from slurm_inspector.interpret import _common, _safe_convert

"""
These functions decode single output tokens into optional python values.
Placeholders and garbage decode to None, never to an exception.
"""

_UNSIGNED_REGEX = re.compile(r"^\+?[0-9]+$")


def u32(_v: str) -> Optional[int]:
    """
    "42" -> 42
    "N/A" -> None
    "-1" -> None
    "4294967296" -> None
    """
    out = _safe_convert.convert_values_unsafe_to_none(_common.PLACEHOLDERS, _v)
    if out is not None and not _UNSIGNED_REGEX.match(out):
        out = None
    out = _safe_convert.type_cast_int_unsafe_to_none(out)
    out = _safe_convert.restrict_range_to_none(0, _common.U32_MAX, out)
    return out


def f64(_v: str) -> Optional[float]:
    """
    "0.22" -> 0.22
    "*" -> None
    """
    out = _safe_convert.convert_values_unsafe_to_none(_common.PLACEHOLDERS, _v)
    if out is not None and "_" in out:
        out = None
    out = _safe_convert.type_cast_float_unsafe_to_none(out)
    return out


def node_list(_v: str) -> List[str]:
    """
    "" -> []
    "a" -> ["a"]
    "a,b,c" -> ["a", "b", "c"]
    """
    if _v == "":
        return []
    return delimited_list(",", _v)


def delimited_list(_delimiter: str, _v: str) -> List[str]:
    """
    x,y,... -> [x, y, ...]
    '' -> ['']
    """
    return _v.split(_delimiter)

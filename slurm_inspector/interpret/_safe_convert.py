from typing import Iterable, Optional, Type, TypeVar, Union

T = TypeVar("T")
Numeric = Union[int, float]
NumericT = TypeVar("NumericT", bound=Numeric)


def convert_values_unsafe_to_none(_unsafe_v: Iterable[str], _v: str) -> Optional[str]:
    if _v in _unsafe_v:
        out = None
    else:
        out = _v
    return out


def type_cast_float_unsafe_to_none(_v: Union[str, None]) -> Optional[float]:
    return type_cast_value_unsafe_to_safe(float, None, _v)


def type_cast_int_unsafe_to_none(_v: Union[str, None]) -> Optional[int]:
    return type_cast_value_unsafe_to_safe(int, None, _v)


def type_cast_value_unsafe_to_safe(
    _type: Type[T], _safe_v: Union[T, None], _v: Union[str, None]
) -> Optional[T]:
    if _v is None:
        return _safe_v
    try:
        out = _type(_v)  # type: ignore
    except (TypeError, ValueError, OverflowError):
        out = _safe_v
    return out


def restrict_range_to_none(
    _lo: NumericT, _hi: NumericT, _v: Optional[NumericT]
) -> Optional[NumericT]:
    if _v is None or _v < _lo or _hi < _v:
        out = None
    else:
        out = _v
    return out

import math

from typing import Protocol, TypeVar

T = TypeVar("T", bound="SupportsMulAdd")


class SupportsMulAdd(Protocol):
    """Scalar usable by the evaluators: multiplication and addition within one type."""
    def __mul__(self: T, other: T) -> T: ...
    def __add__(self: T, other: T) -> T: ...


def multiply_accumulate(acc: T, x: T, term: T) -> T:
    return acc * x + term


# math.fma only exists from Python 3.13 onward.
_math_fma = getattr(math, "fma", None)


def fused_multiply_accumulate(acc: T, x: T, term: T) -> T:
    """Multiply-accumulate with a single rounding for floats, where the interpreter supports it.

    Non-float operands (int, Fraction, Decimal, complex...) always go through the
    plain `acc * x + term` step, since math.fma coerces its arguments to float.
    """
    if _math_fma is not None and type(acc) is float and type(x) is float and type(term) is float:
        return _math_fma(acc, x, term)
    return multiply_accumulate(acc, x, term)


def has_native_fma() -> bool:
    return _math_fma is not None


def zero_of(value: T) -> T:
    """Additive identity of the type of `value`, e.g. 0 for int, 0.0 for float, Fraction(0)..."""
    return type(value)()

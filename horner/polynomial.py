"""Polynomial evaluation by Horner's method.

Coefficients are always ordered from the highest power down to the constant term:
`[a, b, c, d]` is a*x^3 + b*x^2 + c*x + d, evaluated as ((a*x + b)*x + c)*x + d.

Three entry points share the same reduction and only differ on empty input:

- `eval_polynomial`: strict, raises CardinalityTooLow (`try_eval_polynomial` returns None instead).
- `eval_any_rank_polynomial`: lenient, empty input is the zero polynomial.
- `eval_known_rank_polynomial`: lenient, for a coefficient count fixed up-front.
"""
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable, Optional, Sequence, Tuple

from horner.numeric import T, multiply_accumulate, zero_of

MulAdd = Callable[[T, T, T], T]
KnownRankEvaluator = Callable[..., T]

_EMPTY = object()


class PolynomialEvalError(ValueError):
    """Base class for polynomial evaluation errors."""


class CardinalityTooLow(PolynomialEvalError):
    """Raised by the strict evaluator when there is not a single coefficient to evaluate."""
    def __init__(self, message: str = "Cardinality of coefficients sequence is too low."):
        super().__init__(message)


class RankMismatch(PolynomialEvalError):
    """Raised when a known-rank evaluator is handed a sequence of another length."""
    def __init__(self, expected_rank: int, actual_rank: int):
        super().__init__("Expected %d coefficients, got %d" % (expected_rank, actual_rank))
        self.expected_rank: int = expected_rank
        self.actual_rank: int = actual_rank


def horner_reduce(x: T, seed: T, terms: Iterable[T], mul_add: MulAdd = multiply_accumulate) -> T:
    """Fold `terms` into the accumulator `seed` with one multiply-accumulate per term.

    n coefficients (seed included) cost exactly n-1 steps. Overflow and NaN behaviour
    is whatever the numeric type does.
    """
    result = seed
    for term in terms:
        result = mul_add(result, x, term)

    return result


def eval_polynomial(x: T, coefficients: Iterable[T], mul_add: MulAdd = multiply_accumulate) -> T:
    """Evaluate the polynomial at x. Raises CardinalityTooLow if `coefficients` is empty.

    >>> eval_polynomial(5, [72, 81, 99])
    2304
    """
    terms = iter(coefficients)
    seed = next(terms, _EMPTY)
    if seed is _EMPTY:
        raise CardinalityTooLow()

    return horner_reduce(x, seed, terms, mul_add)


def try_eval_polynomial(x: T, coefficients: Iterable[T], mul_add: MulAdd = multiply_accumulate) -> Optional[T]:
    """Same as `eval_polynomial`, but returns None rather than raising on empty `coefficients`."""
    terms = iter(coefficients)
    seed = next(terms, _EMPTY)
    if seed is _EMPTY:
        return None

    return horner_reduce(x, seed, terms, mul_add)


def eval_any_rank_polynomial(x: T, coefficients: Iterable[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    """Evaluate the polynomial at x, treating empty `coefficients` as the zero polynomial.

    The zero returned for empty input is `zero` if given, otherwise the zero of type(x).
    Never raises on its own account.
    """
    terms = iter(coefficients)
    seed = next(terms, _EMPTY)
    if seed is _EMPTY:
        return zero_of(x) if zero is None else zero

    return horner_reduce(x, seed, terms, mul_add)


def _check_rank(rank: int, coefficients: Sequence[T]) -> None:
    if len(coefficients) != rank:
        raise RankMismatch(rank, len(coefficients))


def _rank_0_evaluator(x: T, coefficients: Sequence[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    _check_rank(0, coefficients)
    return zero_of(x) if zero is None else zero


def _rank_1_evaluator(x: T, coefficients: Sequence[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    _check_rank(1, coefficients)
    return coefficients[0]


def _rank_2_evaluator(x: T, coefficients: Sequence[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    _check_rank(2, coefficients)
    return mul_add(coefficients[0], x, coefficients[1])


def _rank_3_evaluator(x: T, coefficients: Sequence[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    _check_rank(3, coefficients)
    return mul_add(mul_add(coefficients[0], x, coefficients[1]), x, coefficients[2])


def _rank_n_evaluator(rank: int, x: T, coefficients: Sequence[T], mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    _check_rank(rank, coefficients)
    return eval_any_rank_polynomial(x, coefficients, mul_add, zero)


_UNROLLED_EVALUATORS: Tuple[KnownRankEvaluator, ...] = (_rank_0_evaluator, _rank_1_evaluator, _rank_2_evaluator, _rank_3_evaluator)


def known_rank_evaluator(rank: int) -> KnownRankEvaluator:
    """Get an evaluator for sequences of exactly `rank` coefficients.

    The returned callable has the signature `(x, coefficients, mul_add=multiply_accumulate, zero=None)`.
    Ranks 0 to 3 are unrolled, larger ones are bound on demand to the any-rank evaluator.
    Results are identical either way. Calling it with a sequence of another length raises
    RankMismatch.
    """
    if rank < 0:
        raise ValueError("Rank must be >= 0, got %d" % rank)

    if rank < len(_UNROLLED_EVALUATORS):
        return _UNROLLED_EVALUATORS[rank]

    return partial(_rank_n_evaluator, rank)


def eval_known_rank_polynomial(x: T, coefficients: Sequence[T], rank: Optional[int] = None, mul_add: MulAdd = multiply_accumulate, zero: Optional[T] = None) -> T:
    """Evaluate a polynomial whose coefficient count is known in advance.

    Same results as `eval_any_rank_polynomial`, including the `zero` override for
    rank 0. `rank` defaults to len(coefficients); pass it explicitly to have the
    length checked.
    """
    if rank is None:
        rank = len(coefficients)

    return known_rank_evaluator(rank)(x, coefficients, mul_add, zero)


def eval_polynomial_naive(x: T, coefficients: Sequence[T]) -> T:
    """Power-sum evaluation of polynomial at x, with the same highest-power-first ordering.

    Reference only: it takes about twice the multiplications of Horner's method.
    """
    if len(coefficients) == 0:
        return zero_of(x)

    result = coefficients[-1]
    current_power = None
    for coefficient in coefficients[-2::-1]:
        current_power = x if current_power is None else (current_power * x)
        result = result + (current_power * coefficient)

    return result


@dataclass(frozen=True)
class Polynomial:
    """Immutable coefficient tuple, highest power first. Calling it evaluates at x."""
    coefficients: Tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(self.coefficients))

    @staticmethod
    def from_ascending(coefficients: Iterable) -> "Polynomial":
        """Build from constant-first coefficients (a[0] + a[1]*x + ...), as found in astronomy tables."""
        return Polynomial(tuple(reversed(tuple(coefficients))))

    @property
    def degree(self) -> int:
        """Length minus one; -1 for the empty (zero) polynomial. Leading zeroes are not stripped."""
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __call__(self, x, mul_add: MulAdd = multiply_accumulate):
        return eval_any_rank_polynomial(x, self.coefficients, mul_add)

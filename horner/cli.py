import argparse

from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction

from horner.numeric import fused_multiply_accumulate, has_native_fma, multiply_accumulate
from horner.polynomial import PolynomialEvalError, eval_any_rank_polynomial, eval_known_rank_polynomial, eval_polynomial

NUMERIC_TYPES = {
    "int": int,
    "float": float,
    "fraction": Fraction,
    "decimal": Decimal,
    "complex": complex,
}

EVALUATORS = {
    "strict": eval_polynomial,
    "lenient": eval_any_rank_polynomial,
    "known-rank": eval_known_rank_polynomial,
}


@dataclass
class ToolOptions:
    verbose_logs: bool = False
    numeric_type: str = "float"
    mode: str = "lenient"
    use_fma: bool = False


@dataclass
class CommandLine:
    options: ToolOptions
    x: object = None
    coefficients: list = field(default_factory=list)


def nested_form(coefficients: list) -> str:
    """Render the Horner nesting, e.g. `((72)*x + 81)*x + 99`."""
    if not coefficients:
        return "0"

    form = str(coefficients[0])
    for coefficient in coefficients[1:]:
        form = f"({form})*x + {coefficient}"

    return form


def parse_command_line(argv: list = None) -> CommandLine:
    options = ToolOptions()

    parser = argparse.ArgumentParser(prog="horner", description="Evaluate a polynomial at X with Horner's method.")
    parser.add_argument("x", metavar="X", type=str, help="Point at which to evaluate")
    parser.add_argument("coefficients", metavar="C", type=str, nargs="*", help="Coefficients, highest power first")
    parser.add_argument("--type", dest="numeric_type", choices=sorted(NUMERIC_TYPES), default=options.numeric_type, help=f'Numeric type of X and coefficients (default: "{options.numeric_type}")')
    parser.add_argument("--mode", choices=sorted(EVALUATORS), default=options.mode, help=f'Evaluator to use (default: "{options.mode}")')
    parser.add_argument("--fma", action="store_true", help="Use fused multiply-add for floats where available")
    parser.add_argument("--verbose", help="increase output verbosity", action="store_true")

    args = parser.parse_args(argv)

    options.verbose_logs = args.verbose
    options.numeric_type = args.numeric_type
    options.mode = args.mode
    options.use_fma = args.fma

    to_number = NUMERIC_TYPES[options.numeric_type]
    try:
        x = to_number(args.x)
        coefficients = [to_number(c) for c in args.coefficients]
    except (ValueError, ArithmeticError) as e:
        parser.error(f"Invalid {options.numeric_type} value: {e}")

    return CommandLine(options, x, coefficients)


def main(argv: list = None) -> int:
    cmd_line = parse_command_line(argv)
    options = cmd_line.options

    mul_add = fused_multiply_accumulate if options.use_fma else multiply_accumulate
    evaluator = EVALUATORS[options.mode]

    if options.verbose_logs:
        print(f"Evaluating {nested_form(cmd_line.coefficients)} at x = {cmd_line.x} ({options.numeric_type}, {options.mode} mode)")
        if options.use_fma and not has_native_fma():
            print("WARNING: math.fma is not available, using plain multiply-add")

    try:
        result = evaluator(cmd_line.x, cmd_line.coefficients, mul_add=mul_add)
    except PolynomialEvalError as e:
        print(f"ERROR: {e}")
        return 1

    print(result)
    return 0

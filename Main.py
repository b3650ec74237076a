"""
nandu: translate And/Or/Nand gate expressions into NAND-only form.

    $ nandu "And(a, Or(b, c))"
    $ echo "Or(a, b)" | nandu --spice out/boolean_circuit.spice
"""
import argparse
import sys

from mycode_netlist import gate_count, to_instances
from nand_errors import TranslateError
from nand_parser import parse
from nand_tree import equivalent, render, to_nand, variables
from Netlist_generator import write_spice

# --verify checks 2**n assignments.
MAX_VERIFY_VARIABLES = 20


def translate(text, max_depth=None):
    """Return the NAND-only rendering of a gate expression."""
    return render(to_nand(parse(text, max_depth=max_depth)))


def debug(verbose, *args):
    if verbose:
        print(*args, file=sys.stderr)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="nandu",
        description="Translate an And/Or/Nand gate expression into NAND gates only.",
    )
    parser.add_argument(
        "expression", nargs="?",
        help="expression to translate; read from standard input when omitted",
    )
    parser.add_argument("--max-depth", type=int, default=None,
                        help="reject function calls nested deeper than this (default: no limit)")
    parser.add_argument("--verify", action="store_true",
                        help="check the translation against the input on every assignment "
                             f"(at most {MAX_VERIFY_VARIABLES} distinct variables)")
    parser.add_argument("--spice", metavar="PATH",
                        help="also write a NAND-only SPICE netlist to PATH")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print intermediate stages to stderr")
    return parser


def verify(expression, nand_expression):
    names = variables(expression)
    if len(names) > MAX_VERIFY_VARIABLES:
        raise TranslateError(
            f"--verify supports at most {MAX_VERIFY_VARIABLES} variables, got {len(names)}"
        )
    if not equivalent(expression, nand_expression):
        raise TranslateError("translation is not equivalent to the input")


def run(args, text):
    expression = parse(text, max_depth=args.max_depth)
    debug(args.verbose, "Final AST:", render(expression))

    nand_expression = to_nand(expression)
    debug(args.verbose, "NAND AST:", render(nand_expression))
    debug(args.verbose, "Gate count:", gate_count(nand_expression))

    if args.verify:
        verify(expression, nand_expression)

    if args.spice:
        path = write_spice(to_instances(nand_expression), variables(nand_expression), args.spice)
        debug(args.verbose, "SPICE netlist written to", path)

    return render(nand_expression)


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    text = args.expression if args.expression is not None else sys.stdin.read()

    try:
        translation = run(args, text)
    except (TranslateError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(translation)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Gate expression trees: node types, the NAND rewrite, the printer and a
boolean evaluator used to check that rewrites preserve meaning.

Every traversal goes through `fold`, which walks the tree with an explicit
stack, so nesting depth is bounded by memory rather than the interpreter's
recursion limit.
"""
import itertools
from dataclasses import dataclass
from enum import Enum

from nand_errors import InvalidFunctionId


class GateId(Enum):
    AND = "And"
    OR = "Or"
    NAND = "Nand"

    @property
    def arity(self):
        return 2

    @classmethod
    def lookup(cls, name, argc):
        """Return the gate called `name` taking `argc` arguments, or None."""
        try:
            gate = cls(name)
        except ValueError:
            return None
        if gate.arity != argc:
            return None
        return gate


@dataclass(frozen=True)
class Var:
    id: str

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class Func:
    gate: GateId
    args: tuple

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))
        if len(self.args) != self.gate.arity:
            raise InvalidFunctionId(self.gate.value, len(self.args))

    def __str__(self):
        return render(self)


def nand(x, y):
    return Func(GateId.NAND, (x, y))


def fold(node, leaf, func):
    """
    Post-order fold, left to right.
    `leaf(var)` maps a Var; `func(node, values)` combines a Func with the
    folded values of its arguments.
    """
    values = []
    stack = [(node, False)]
    while stack:
        n, expanded = stack.pop()
        if isinstance(n, Var):
            values.append(leaf(n))
        elif expanded:
            argc = len(n.args)
            args = values[-argc:]
            del values[-argc:]
            values.append(func(n, args))
        else:
            stack.append((n, True))
            stack.extend((arg, False) for arg in reversed(n.args))
    return values[0]


# --- Rewrite rules ---
# Operands are already rewritten when a rule runs. Nodes are frozen, so a
# subtree used twice is never observed changing through the other occurrence.

def _nand_to_nand(x, y):
    return nand(x, y)


def _and_to_nand(x, y):
    return nand(nand(x, y), nand(x, y))


def _or_to_nand(x, y):
    return nand(nand(x, x), nand(y, y))


demorgan_rules = {
    GateId.AND: {
        "rewrite": _and_to_nand,
        "description": "A AND B = NAND(NAND(A,B), NAND(A,B))",
        "evaluate": lambda a, b: a and b,
    },
    GateId.OR: {
        "rewrite": _or_to_nand,
        "description": "A OR B = NAND(NAND(A,A), NAND(B,B))",
        "evaluate": lambda a, b: a or b,
    },
    GateId.NAND: {
        "rewrite": _nand_to_nand,
        "description": "NAND(A,B) is already canonical",
        "evaluate": lambda a, b: not (a and b),
    },
}


def to_nand(node):
    """Rewrite a tree into NAND-only form, children before parents."""
    return fold(
        node,
        lambda var: var,
        lambda n, args: demorgan_rules[n.gate]["rewrite"](*args),
    )


def is_nand_only(node):
    return fold(
        node,
        lambda var: True,
        lambda n, args: n.gate is GateId.NAND and all(args),
    )


def render(node):
    return fold(
        node,
        lambda var: var.id,
        lambda n, args: f"{n.gate.value}({', '.join(args)})",
    )


# --- Evaluation ---

def variables(node):
    """Variable names in order of first appearance."""
    seen = {}
    stack = [node]
    while stack:
        n = stack.pop()
        if isinstance(n, Var):
            seen.setdefault(n.id, None)
        else:
            stack.extend(reversed(n.args))
    return list(seen)


def evaluate(node, assignment):
    return fold(
        node,
        lambda var: bool(assignment[var.id]),
        lambda n, args: bool(demorgan_rules[n.gate]["evaluate"](*args)),
    )


def assignments(names):
    for bits in itertools.product((False, True), repeat=len(names)):
        yield dict(zip(names, bits))


def equivalent(a, b):
    """
    True when both trees agree under every assignment of their variables.
    Checks 2**n assignments for n distinct variables.
    """
    names = variables(a)
    names += [name for name in variables(b) if name not in names]
    return all(evaluate(a, env) == evaluate(b, env) for env in assignments(names))

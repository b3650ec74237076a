"""
Lower a NAND-only tree into a flat list of 2-input NAND instances.

Post-order traversal (left, right, node). Every Nand node becomes one gate,
repeated subtrees are emitted again, and the last gate created drives Y.
Inputs are renamed `in_<variable>` so no variable can collide with Y, the
supplies or the internal wires once SPICE folds case.
"""
from dataclasses import dataclass

from nand_tree import GateId, Var, fold

OUTPUT_NET = "Y"


def input_net(name):
    return f"in_{name}"


@dataclass(frozen=True)
class Nand2:
    name: str
    in1: str
    in2: str
    out: str

    def spice_line(self):
        return f"{self.name} {self.in1} {self.in2} {self.out} VDD VSS nand2"


def to_instances(node):
    """Convert a NAND-only tree to Nand2 instances X1..Xn."""
    if isinstance(node, Var):
        raise ValueError("a bare variable has no gates to lower")

    result = []
    wire_counter = 0

    def get_wire():
        nonlocal wire_counter
        wire_counter += 1
        return f"w{wire_counter}"

    def emit(n, nets):
        if n.gate is not GateId.NAND:
            raise ValueError(f"Unsupported operation: {n.gate.value}")
        out = get_wire()
        result.append(Nand2(f"X{len(result) + 1}", nets[0], nets[1], out))
        return out

    fold(node, lambda var: input_net(var.id), emit)
    last = result[-1]
    result[-1] = Nand2(last.name, last.in1, last.in2, OUTPUT_NET)
    return result


def gate_count(node):
    return fold(node, lambda var: 0, lambda n, counts: 1 + sum(counts))

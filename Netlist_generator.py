import pathlib

from mycode_netlist import OUTPUT_NET, input_net


# --- Stimulus: one pulse per input, each with twice the period of the last ---
def pulse_sources(nets):
    lines = []
    for i, net in enumerate(nets):
        width = 5 * 2 ** i
        lines.append(f"V{net} {net} 0 PULSE(0 {{VDD}} 0 100p 100p {width}n {2 * width}n)")
    return lines


def render_spice(inst_lines, inputs):
    """Build a NAND-only SPICE deck around the given instance lines.

    `inputs` are variable names; they become the `in_<name>` nets the
    instance lines refer to.
    """
    nets = [input_net(name) for name in inputs]
    ports = " ".join(nets + [OUTPUT_NET])
    stop = 10 * 2 ** max(len(nets) - 1, 0) * 2
    lines = []
    lines.append("* NAND-only SPICE netlist")
    lines.append(".model NMOS NMOS (LEVEL=1)")
    lines.append(".model PMOS PMOS (LEVEL=1)")
    lines.append(".subckt nand2 A B Y VDD VSS")
    lines.append("MP1 Y A VDD VDD PMOS")
    lines.append("MP2 Y B VDD VDD PMOS")
    lines.append("MN1 Y A n VSS NMOS")
    lines.append("MN2 n B VSS VSS NMOS")
    lines.append(".ends nand2")
    lines.append(f".subckt boolean_circuit {ports} VDD VSS")
    lines += inst_lines
    lines.append(".ends boolean_circuit")
    lines.append(".param VDD=1.8")
    lines.append("VDD VDD 0 {VDD}")
    lines.append("VSS VSS 0 0")
    lines += pulse_sources(nets)
    lines.append(f"XU {ports} VDD VSS boolean_circuit")
    lines.append(f".tran 0.1n {stop}n")
    lines.append(".control")
    lines.append("run")
    lines.append("plot " + " ".join(f"v({net})" for net in nets + [OUTPUT_NET]))
    lines.append(".endc")
    lines.append(".end")
    return "\n".join(lines) + "\n"


def write_spice(instances, inputs, path: pathlib.Path):
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_spice([inst.spice_line() for inst in instances], inputs))
    return path

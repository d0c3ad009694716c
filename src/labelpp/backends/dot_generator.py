"""
Graphviz DOT generator for labelpp programs.

Draws the label reference graph: every instruction line points at the
lines its labels resolve to.

Supports two modes:
    - SIMPLE: Line text and plain edges
    - DETAILED: Canonical indices, declared labels and branch labels
"""

from enum import Enum
from typing import List

from labelpp.model import Program
from labelpp.instructions import BinaryInstruction, PassThrough


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    return f'"{s}"'


def _node_id(index: int) -> str:
    return f"L{index}"


def _missing_id(label: str) -> str:
    return _escape_dot_string(f"?{label}")


def _edge_labels(instruction) -> List[str]:
    if isinstance(instruction, BinaryInstruction):
        return ["true", "false"]
    return [instruction.opcode.value.lower()]


def generate_dot(program: Program, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a program.

    Args:
        program: Parsed program to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines = []

    # Header
    lines.append("digraph program {")
    lines.append("  rankdir=TB;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    # =========================================================================
    # NODES
    # =========================================================================

    for line, instruction in zip(program.lines, program.instructions):
        declared = program.declared_at(line.index)
        if isinstance(instruction, PassThrough) and not declared:
            continue

        text = line.content.strip()
        if mode == DotMode.DETAILED:
            parts = [f"{line.index}: {text}"] + [f"@{name}" for name in declared]
            label = "\\n".join(_escape_dot_string(p)[1:-1] for p in parts)
            label_str = f'"{label}"'
        else:
            label_str = _escape_dot_string(text)

        attrs = f"label={label_str}"
        if declared:
            attrs += ", fillcolor=lightyellow"
        lines.append(f"  {_node_id(line.index)} [{attrs}];")

    missing = []
    for instruction in program.instructions:
        for name in instruction.references:
            if program.get_label(name) is None and name not in missing:
                missing.append(name)

    for name in missing:
        lines.append(f"  {_missing_id(name)} [shape=octagon, fillcolor=salmon];")

    # =========================================================================
    # EDGES (REFERENCES)
    # =========================================================================

    for line, instruction in zip(program.lines, program.instructions):
        if isinstance(instruction, PassThrough):
            continue

        for name, edge_label in zip(instruction.references, _edge_labels(instruction)):
            target = program.get_label(name)
            attrs = []
            if target is None:
                to_id = _missing_id(name)
                attrs.append("style=dashed")
            else:
                to_id = _node_id(target)
            if mode == DotMode.DETAILED:
                attrs.append(f"label={_escape_dot_string(edge_label)}")

            edge_attr = f" [{', '.join(attrs)}]" if attrs else ""
            lines.append(f"  {_node_id(line.index)} -> {to_id}{edge_attr};")

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(program: Program, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        program: Program to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(program, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]

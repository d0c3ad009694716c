"""
Text renderer for labelpp instructions.

Turns a classified instruction plus the canonical indices of its
references back into a source line.
"""

from typing import Sequence

from labelpp.instructions import Instruction, PassThrough


def render_instruction(instruction: Instruction, addresses: Sequence[int] = ()) -> str:
    """
    Render one instruction.

    Args:
        instruction: Classified line
        addresses: Resolved indices, one per entry in instruction.references

    Returns:
        `<OPCODE> <index>...` with the original terminator, or the
        pass-through text verbatim
    """
    if isinstance(instruction, PassThrough):
        return instruction.text

    if len(addresses) != len(instruction.references):
        raise ValueError(
            f"{instruction.opcode.value} takes {len(instruction.references)} "
            f"address(es), got {len(addresses)}"
        )

    operands = " ".join(str(a) for a in addresses)
    return f"{instruction.opcode.value} {operands}{instruction.terminator}"


__all__ = ["render_instruction"]

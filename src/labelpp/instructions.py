"""
Instruction Variants for labelpp

Every canonical line is classified into exactly one tagged variant
before anything is rendered:

    - UnaryInstruction   (LDF @label)
    - BinaryInstruction  (TSEL @a @b, SEL @a @b)
    - PassThrough        (anything else, kept verbatim)

ARCHITECTURAL RULE:
    Classification (parser) and rendering (backends) never mix.
    These objects carry structure only.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Opcode(Enum):
    """
    Instruction keywords that take label references.

    Keywords are case-sensitive and must start the line.
    """

    LDF = "LDF"
    TSEL = "TSEL"
    SEL = "SEL"

    @property
    def arity(self) -> int:
        """Number of @label operands the keyword takes."""
        return 1 if self is Opcode.LDF else 2


class Instruction(ABC):
    """
    Base class for all classified lines.

    DO NOT:
        - Resolve labels here (belongs in resolver)
        - Produce output text here (belongs in backends)
    """

    @property
    def references(self) -> Tuple[str, ...]:
        """Referenced label names, in source order."""
        return ()


@dataclass(frozen=True)
class UnaryInstruction(Instruction):
    """
    A single-label instruction.

    Example:
        LDF @body

    Becomes:
        UnaryInstruction(opcode=Opcode.LDF, label="body", terminator="\\n")
    """

    opcode: Opcode
    label: str
    terminator: str = ""

    @property
    def references(self) -> Tuple[str, ...]:
        return (self.label,)


@dataclass(frozen=True)
class BinaryInstruction(Instruction):
    """
    A two-label select instruction.

    TSEL and SEL share this shape and differ only in opcode.
    The first label is the branch taken on a true condition,
    the second the branch taken otherwise.

    Example:
        TSEL @then @else

    Becomes:
        BinaryInstruction(
            opcode=Opcode.TSEL,
            first="then",
            second="else",
            terminator="\\n",
        )
    """

    opcode: Opcode
    first: str
    second: str
    terminator: str = ""

    @property
    def references(self) -> Tuple[str, ...]:
        return (self.first, self.second)


@dataclass(frozen=True)
class PassThrough(Instruction):
    """
    A line with no recognized label references.

    `text` is the line exactly as read, terminator included.
    """

    text: str

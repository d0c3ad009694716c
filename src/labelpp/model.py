"""
Core Program Model Objects

Defines the data structures produced by the parser:
    - SourceLine (one non-blank input line)
    - Program (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about output formats
        - Are computed once and never mutated between passes
        - Are fully serializable
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict

from .instructions import Instruction


@dataclass(frozen=True)
class SourceLine:
    """
    One line of the canonical line sequence.

    Properties:
        index:
            0-based position in the canonical (non-blank) sequence.
            This is the number every label resolves to.

        text:
            The line as read, including its terminator.
    """

    index: int
    text: str

    @property
    def terminator(self) -> str:
        if self.text.endswith("\r\n"):
            return "\r\n"
        if self.text.endswith("\n"):
            return "\n"
        return ""

    @property
    def content(self) -> str:
        """The line without its terminator."""
        return self.text[:len(self.text) - len(self.terminator)]


@dataclass
class Program:
    """
    Root container for a parsed program.

    Everything the resolver and the backends need is derivable from
    this object alone.

    Properties:
        lines:
            The canonical line sequence, in input order

        labels:
            Label name -> canonical index

        instructions:
            One classified Instruction per canonical line

    INVARIANTS:
        - len(instructions) == len(lines)
        - every value in labels is a valid index into lines
    """

    lines: List[SourceLine] = field(default_factory=list)
    labels: Dict[str, int] = field(default_factory=dict)
    instructions: List[Instruction] = field(default_factory=list)

    def get_label(self, name: str) -> Optional[int]:
        """
        Look up the canonical index a label is bound to.

        Args:
            name: Label name without the leading '@'

        Returns:
            Canonical index or None if the label is not declared
        """
        return self.labels.get(name)

    def declared_at(self, index: int) -> List[str]:
        """Label names bound to the given canonical index."""
        return [name for name, i in self.labels.items() if i == index]

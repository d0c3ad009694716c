"""
Reference resolver for labelpp (Program → output text).

Substitutes every @label reference with the canonical index of the
line that declares it. The transform is whole-or-nothing: the first
unknown label aborts the run and no output is produced.
"""

from dataclasses import dataclass
from typing import List, Optional

from labelpp.model import Program
from labelpp.parser import PreprocessError, parse_program
from labelpp.instructions import Instruction
from labelpp.backends.text_renderer import render_instruction


class UnresolvedLabelError(PreprocessError):
    """Raised when a reference names a label nobody declared."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown label: {label}")


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of a resolve() call.

    Exactly one of `output` and `error` is set.
    """

    output: Optional[str] = None
    error: Optional[UnresolvedLabelError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the output, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.output


def _addresses(program: Program, instruction: Instruction) -> List[int]:
    addresses = []
    for name in instruction.references:
        index = program.get_label(name)
        if index is None:
            raise UnresolvedLabelError(name)
        addresses.append(index)
    return addresses


def resolve(program: Program) -> Resolution:
    """
    Rewrite every instruction of a program.

    Args:
        program: Parsed program (label table already built)

    Returns:
        Resolution holding either the full output text or the first
        UnresolvedLabelError in line order
    """
    rendered = []
    try:
        for instruction in program.instructions:
            rendered.append(render_instruction(instruction, _addresses(program, instruction)))
    except UnresolvedLabelError as e:
        return Resolution(error=e)

    return Resolution(output="".join(rendered))


def preprocess(text: str, strict: bool = False) -> str:
    """
    Parse and resolve raw text in one call.

    Raises:
        UnresolvedLabelError: If any reference is unknown
        DuplicateLabelError: If strict and a label is declared twice
    """
    return resolve(parse_program(text, strict=strict)).unwrap()


__all__ = ["UnresolvedLabelError", "Resolution", "resolve", "preprocess"]

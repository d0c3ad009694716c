"""
Source Parser for labelpp (Raw Text → Program).

Runs the first two steps of the preprocessor:
    1. Canonicalize: split into lines, drop blank ones
    2. Build the label table from `; @name` declarations
and classifies every canonical line into an Instruction variant.

Syntax Notes:
    - Declaration: `; @name` anywhere on a line (one per line)
    - References:  `LDF @a`, `TSEL @a @b`, `SEL @a @b` (whole line)
    - Names are ASCII word characters: [A-Za-z0-9_]+
"""

import re
import warnings
from typing import Dict, List, Iterable

from labelpp.model import Program, SourceLine
from labelpp.instructions import (
    Instruction,
    Opcode,
    UnaryInstruction,
    BinaryInstruction,
    PassThrough,
)


class PreprocessError(Exception):
    """Base class for all preprocessing failures."""
    pass


class DuplicateLabelError(PreprocessError):
    """Raised in strict mode when a label is declared more than once."""

    def __init__(self, label: str, first: int, second: int):
        self.label = label
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate label: {label} (lines {first} and {second})"
        )


_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
_DECLARATION_RE = re.compile(r"; @(\w+)", re.ASCII)

# Characters a blank line may consist of: ASCII whitespace and NUL.
_BLANK_CHARS = " \t\n\v\f\r\0"

# Tested in this order, first match wins.
_INSTRUCTION_PATTERNS = [
    (Opcode.LDF, re.compile(r"LDF @(\w+)", re.ASCII)),
    (Opcode.TSEL, re.compile(r"TSEL @(\w+) @(\w+)", re.ASCII)),
    (Opcode.SEL, re.compile(r"SEL @(\w+) @(\w+)", re.ASCII)),
]


def split_lines(text: str) -> List[str]:
    """Split text on '\\n', keeping each line's terminator."""
    return _LINE_RE.findall(text)


def canonicalize(text: str) -> List[SourceLine]:
    """
    Build the canonical line sequence.

    Lines made only of ASCII whitespace or NUL are dropped; the survivors
    are numbered from 0. That numbering is the only one labels use.

    Args:
        text: Full raw input

    Returns:
        Ordered list of SourceLine objects
    """
    kept = [line for line in split_lines(text) if line.strip(_BLANK_CHARS)]
    return [SourceLine(index=i, text=line) for i, line in enumerate(kept)]


def find_declaration(line: SourceLine) -> str | None:
    """Return the label declared on a line, if any."""
    match = _DECLARATION_RE.search(line.content)
    return match.group(1) if match else None


def build_label_table(lines: Iterable[SourceLine], strict: bool = False) -> Dict[str, int]:
    """
    Map each declared label to the canonical index of its line.

    Args:
        lines: Canonical line sequence
        strict: Raise on duplicate declarations instead of warning

    Returns:
        Label name -> canonical index, in declaration order

    Raises:
        DuplicateLabelError: If strict and a label is declared twice
    """
    labels: Dict[str, int] = {}

    for line in lines:
        name = find_declaration(line)
        if name is None:
            continue

        if name in labels:
            if strict:
                raise DuplicateLabelError(name, labels[name], line.index)
            # Last declaration wins.
            warnings.warn(
                f"Label {name} redeclared on line {line.index} "
                f"(was line {labels[name]})",
                UserWarning,
            )
        labels[name] = line.index

    return labels


def classify_line(line: SourceLine) -> Instruction:
    """
    Classify one canonical line.

    Each pattern must match the whole line minus its terminator;
    anything else passes through untouched.
    """
    content = line.content

    for opcode, pattern in _INSTRUCTION_PATTERNS:
        match = pattern.fullmatch(content)
        if match is None:
            continue
        if opcode.arity == 1:
            return UnaryInstruction(opcode, match.group(1), line.terminator)
        return BinaryInstruction(opcode, match.group(1), match.group(2), line.terminator)

    return PassThrough(line.text)


def parse_program(text: str, strict: bool = False) -> Program:
    """
    Parse raw text into a Program.

    Args:
        text: Full raw input
        strict: Reject duplicate label declarations

    Returns:
        Program with canonical lines, label table and instructions

    Raises:
        DuplicateLabelError: If strict and a label is declared twice
    """
    lines = canonicalize(text)
    labels = build_label_table(lines, strict=strict)
    instructions = [classify_line(line) for line in lines]

    return Program(lines=lines, labels=labels, instructions=instructions)


__all__ = [
    "PreprocessError",
    "DuplicateLabelError",
    "split_lines",
    "canonicalize",
    "find_declaration",
    "build_label_table",
    "classify_line",
    "parse_program",
]

"""
Program Analyzer — label inventory and reference diagnostics.

This module provides lightweight analysis of Program objects:
    - Instruction counts per opcode
    - Declared, referenced, unused and unresolved labels
    - Forward / backward reference counts
    - Duplicate declarations (last one wins in the table)

IMPORTANT: It does NOT modify the program.
It only produces read-only reports.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Set

from labelpp.model import Program
from labelpp.instructions import PassThrough
from labelpp.parser import find_declaration


@dataclass
class ProgramReport:
    """Analysis report for a program."""

    total_lines: int = 0
    total_instructions: int = 0
    opcode_counts: Dict[str, int] = field(default_factory=dict)

    # Label usage
    declared_labels: Set[str] = field(default_factory=set)
    label_usage: Dict[str, int] = field(default_factory=dict)
    unused_labels: Set[str] = field(default_factory=set)
    unresolved_labels: Set[str] = field(default_factory=set)
    duplicate_labels: Dict[str, List[int]] = field(default_factory=dict)

    # Reference direction
    forward_references: int = 0
    backward_references: int = 0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_program(program: Program) -> ProgramReport:
    """
    Analyze a parsed Program.

    Returns a ProgramReport with counts and warnings.
    """
    report = ProgramReport(total_lines=len(program.lines))
    report.declared_labels = set(program.labels)

    # =========================================================================
    # 1. DECLARATIONS
    # =========================================================================

    declarations: Dict[str, List[int]] = defaultdict(list)
    for line in program.lines:
        name = find_declaration(line)
        if name is not None:
            declarations[name].append(line.index)

    report.duplicate_labels = {
        name: indices for name, indices in declarations.items() if len(indices) > 1
    }

    # =========================================================================
    # 2. REFERENCES
    # =========================================================================

    opcode_counts: Dict[str, int] = defaultdict(int)
    usage: Dict[str, int] = defaultdict(int)

    for line, instruction in zip(program.lines, program.instructions):
        if isinstance(instruction, PassThrough):
            continue

        report.total_instructions += 1
        opcode_counts[instruction.opcode.value] += 1

        for name in instruction.references:
            usage[name] += 1
            target = program.get_label(name)
            if target is None:
                report.unresolved_labels.add(name)
            elif target > line.index:
                report.forward_references += 1
            else:
                report.backward_references += 1

    report.opcode_counts = dict(opcode_counts)
    report.label_usage = dict(usage)
    report.unused_labels = report.declared_labels - set(usage)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.unresolved_labels:
        report.add_warning(
            f"Unresolved labels: {', '.join(sorted(report.unresolved_labels))}"
        )

    if report.unused_labels:
        report.add_warning(
            f"Unused labels: {', '.join(sorted(report.unused_labels))}"
        )

    for name, indices in sorted(report.duplicate_labels.items()):
        report.add_warning(
            f"Label {name} declared on lines {', '.join(str(i) for i in indices)}"
        )

    return report


__all__ = ["ProgramReport", "analyze_program"]

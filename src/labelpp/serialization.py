"""
Serialization helpers for labelpp objects (Program, Instruction, label tables).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from labelpp.model import Program, SourceLine
from labelpp.instructions import (
    Instruction,
    Opcode,
    UnaryInstruction,
    BinaryInstruction,
    PassThrough,
)


def instruction_to_dict(instr: Instruction) -> Dict[str, Any]:
    if isinstance(instr, UnaryInstruction):
        return {
            "type": "unary",
            "opcode": instr.opcode.value,
            "label": instr.label,
            "terminator": instr.terminator,
        }
    if isinstance(instr, BinaryInstruction):
        return {
            "type": "binary",
            "opcode": instr.opcode.value,
            "first": instr.first,
            "second": instr.second,
            "terminator": instr.terminator,
        }
    if isinstance(instr, PassThrough):
        return {"type": "pass", "text": instr.text}
    raise TypeError(f"Unsupported Instruction type: {type(instr)}")


def instruction_from_dict(d: Dict[str, Any]) -> Instruction:
    t = d.get("type")
    if t == "unary":
        return UnaryInstruction(
            opcode=Opcode(d["opcode"]),
            label=d["label"],
            terminator=d.get("terminator", ""),
        )
    if t == "binary":
        return BinaryInstruction(
            opcode=Opcode(d["opcode"]),
            first=d["first"],
            second=d["second"],
            terminator=d.get("terminator", ""),
        )
    if t == "pass":
        return PassThrough(d["text"])
    raise TypeError(f"Unsupported instruction dict type: {t}")


def program_to_dict(p: Program) -> Dict[str, Any]:
    return {
        "lines": [line.text for line in p.lines],
        "labels": dict(p.labels),
        "instructions": [instruction_to_dict(i) for i in p.instructions],
    }


def program_from_dict(d: Dict[str, Any]) -> Program:
    p = Program()
    p.lines = [SourceLine(index=i, text=text) for i, text in enumerate(d.get("lines", []))]
    p.labels = dict(d.get("labels", {}))
    p.instructions = [instruction_from_dict(i) for i in d.get("instructions", [])]
    return p


def program_to_json(p: Program) -> str:
    return json.dumps(program_to_dict(p), sort_keys=True)


def program_from_json(s: str) -> Program:
    d = json.loads(s)
    return program_from_dict(d)


def program_to_yaml(p: Program) -> str:
    return yaml.safe_dump(program_to_dict(p))


def program_from_yaml(s: str) -> Program:
    d = yaml.safe_load(s)
    return program_from_dict(d)


def labels_to_json(p: Program) -> str:
    """Label table as a JSON object, in declaration order."""
    return json.dumps(p.labels, indent=2)


def labels_to_yaml(p: Program) -> str:
    """Label table as a YAML mapping, in declaration order."""
    return yaml.safe_dump(dict(p.labels), sort_keys=False)

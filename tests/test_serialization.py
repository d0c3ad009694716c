"""
Tests for serialization and deserialization of labelpp objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `labelpp.serialization`.
"""

import json

import pytest
import yaml

from labelpp.parser import parse_program
from labelpp.resolver import resolve
from labelpp.instructions import PassThrough
from labelpp.serialization import (
    instruction_from_dict,
    program_to_dict,
    program_from_dict,
    program_to_json,
    program_from_json,
    program_to_yaml,
    program_from_yaml,
    labels_to_json,
    labels_to_yaml,
)


def build_sample_program():
    return parse_program("; @start\r\nLDF @start\n\nTSEL @start @end\n  JOIN ; @end\nSEL @end @start")


def test_json_roundtrip():
    program = build_sample_program()
    before = program_to_dict(program)
    restored = program_from_json(program_to_json(program))
    assert program_to_dict(restored) == before


def test_yaml_roundtrip():
    program = build_sample_program()
    before = program_to_dict(program)
    restored = program_from_yaml(program_to_yaml(program))
    assert program_to_dict(restored) == before


def test_restored_program_resolves_identically():
    program = build_sample_program()
    restored = program_from_dict(program_to_dict(program))
    assert resolve(restored).unwrap() == resolve(program).unwrap()
    assert restored.lines == program.lines


def test_instruction_dict_shapes():
    d = program_to_dict(build_sample_program())
    assert d["instructions"][1] == {
        "type": "unary", "opcode": "LDF", "label": "start", "terminator": "\n",
    }
    assert d["instructions"][2]["type"] == "binary"
    assert d["instructions"][0] == {"type": "pass", "text": "; @start\r\n"}


def test_unknown_instruction_type():
    with pytest.raises(TypeError):
        instruction_from_dict({"type": "jump"})


def test_pass_through_from_dict():
    assert instruction_from_dict({"type": "pass", "text": "RTN\n"}) == PassThrough("RTN\n")


def test_labels_to_json():
    assert json.loads(labels_to_json(build_sample_program())) == {"start": 0, "end": 3}


def test_labels_to_yaml_keeps_declaration_order():
    dump = labels_to_yaml(parse_program("; @zeta\n; @alpha\n"))
    assert dump == "zeta: 0\nalpha: 1\n"
    assert yaml.safe_load(dump) == {"zeta": 0, "alpha": 1}

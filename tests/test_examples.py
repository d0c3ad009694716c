"""
Test the bundled example programs.
"""

from labelpp.examples import (
    EXAMPLE_OUTPUT,
    build_example_program,
    build_countdown_source,
)
from labelpp.parser import parse_program
from labelpp.resolver import preprocess, resolve


def test_example_program_structure():
    program = build_example_program()
    assert len(program.lines) == 5
    assert program.labels == {"start": 0, "end": 3}
    assert resolve(program).unwrap() == EXAMPLE_OUTPUT


def test_countdown_labels():
    program = parse_program(build_countdown_source(3))
    assert program.labels == {
        "step3": 1,
        "step2": 4,
        "step1": 7,
        "body": 10,
        "done": 12,
    }


def test_countdown_resolves():
    output = preprocess(build_countdown_source(3))
    lines = output.splitlines()
    for line in lines:
        if line.split(" ")[0] in ("LDF", "TSEL", "SEL"):
            assert "@" not in line
    assert lines[2] == "LDF 10"
    assert lines[3] == "TSEL 4 12"
    assert lines[9] == "TSEL 12 12"
    assert lines[13] == "SEL 10 7"


def test_countdown_has_no_blank_lines_in_output():
    output = preprocess(build_countdown_source(2))
    assert all(line.strip() for line in output.splitlines())

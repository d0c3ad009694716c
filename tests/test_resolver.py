"""
Tests for reference resolution (Program → output text).

Covers the whole-or-nothing substitution pass, the Resolution result
value and the preprocess() shortcut.
"""

import pytest
from labelpp.parser import parse_program, PreprocessError
from labelpp.resolver import (
    preprocess,
    resolve,
    Resolution,
    UnresolvedLabelError,
)
from labelpp.examples import EXAMPLE_SOURCE, EXAMPLE_OUTPUT


class TestSubstitution:
    """Test rewriting of LDF / TSEL / SEL."""

    def test_example_program(self):
        assert preprocess(EXAMPLE_SOURCE) == EXAMPLE_OUTPUT

    def test_example_label_table(self):
        program = parse_program(EXAMPLE_SOURCE)
        assert program.labels == {"start": 0, "end": 3}

    def test_forward_and_backward_references(self):
        """A label declared after its use resolves the same way."""
        source = "LDF @later\n; @earlier\nLDF @earlier\n; @later\n"
        assert preprocess(source) == "LDF 3\n; @earlier\nLDF 1\n; @later\n"

    def test_blank_lines_do_not_count(self):
        source = "\n\n; @a\n\n   \nLDF @a\n\n"
        assert preprocess(source) == "; @a\nLDF 0\n"

    def test_blank_line_invariance(self):
        dense = "; @a\nTSEL @a @b\n; @b\nSEL @b @a\n"
        sparse = "\n; @a\n\n\nTSEL @a @b\n  \n; @b\n\t\nSEL @b @a\n\n"
        assert preprocess(dense) == preprocess(sparse)

    def test_pass_through_is_verbatim(self):
        source = "  LDC 1   ; @one\nLDF @one \nldf @one\nADD\n"
        assert preprocess(source) == source

    def test_terminators_are_preserved(self):
        source = "; @a\r\nLDF @a\r\nSEL @a @a"
        assert preprocess(source) == "; @a\r\nLDF 0\r\nSEL 0 0"

    def test_instruction_with_trailing_declaration_passes_through(self):
        """An instruction line with a trailing declaration passes through."""
        source = "LDF @x ; @x\n"
        assert preprocess(source) == source

    def test_empty_input(self):
        assert preprocess("") == ""
        assert preprocess("\n \n") == ""

    def test_rerun_is_a_no_op(self):
        once = preprocess(EXAMPLE_SOURCE)
        assert preprocess(once) == once


class TestUnresolvedLabels:
    """Test the fail-fast path."""

    def test_missing_label_raises(self):
        with pytest.raises(UnresolvedLabelError) as exc:
            preprocess("LDF @missing\n")
        assert exc.value.label == "missing"
        assert str(exc.value) == "Unknown label: missing"

    def test_error_is_a_preprocess_error(self):
        with pytest.raises(PreprocessError):
            preprocess("SEL @a @b\n")

    def test_first_missing_label_in_line_order(self):
        source = "; @ok\nLDF @ok\nTSEL @first @second\nLDF @third\n"
        result = resolve(parse_program(source))
        assert result.error.label == "first"

    def test_left_operand_reported_first(self):
        result = resolve(parse_program("TSEL @x @y\n"))
        assert result.error.label == "x"

    def test_no_partial_output(self):
        result = resolve(parse_program("; @a\nLDF @a\nLDF @nope\n"))
        assert not result.ok
        assert result.output is None


class TestResolution:
    """Test the Resolution result value."""

    def test_ok_result(self):
        result = resolve(parse_program(EXAMPLE_SOURCE))
        assert result.ok
        assert result.error is None
        assert result.unwrap() == EXAMPLE_OUTPUT

    def test_unwrap_raises_carried_error(self):
        error = UnresolvedLabelError("gone")
        result = Resolution(error=error)
        with pytest.raises(UnresolvedLabelError) as exc:
            result.unwrap()
        assert exc.value is error

    def test_empty_program_resolves_to_empty_string(self):
        result = resolve(parse_program(""))
        assert result.ok
        assert result.output == ""

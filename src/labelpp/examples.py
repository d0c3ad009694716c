"""
Example programs for labelpp.

EXAMPLE_SOURCE is the small select/load program used throughout the
docs; build_countdown_source() produces a larger one with a loop, so it
mixes forward and backward references and blank lines.
"""
from labelpp.model import Program
from labelpp.parser import parse_program


EXAMPLE_SOURCE = """\
; @start
LDF @start
TSEL @start @end
; @end
SEL @end @start
"""

EXAMPLE_OUTPUT = """\
; @start
LDF 0
TSEL 0 3
; @end
SEL 3 0
"""


def build_example_program() -> Program:
    return parse_program(EXAMPLE_SOURCE)


def build_countdown_source(count: int = 3) -> str:
    """
    Build a program that counts down from `count`.

    Layout per step:
        LDC <n>          ; @step<n>
        LDF @body
        TSEL @step<n-1> @done    (the last step jumps to @done twice)
    followed by a shared body and a trailing `; @done` block.
    """
    lines = ["  LDC 0", ""]

    for n in range(count, 0, -1):
        lines.append(f"  LDC {n}    ; @step{n}")
        lines.append("LDF @body")
        nxt = f"step{n - 1}" if n > 1 else "done"
        lines.append(f"TSEL @{nxt} @done")
        lines.append("")

    lines.append("  LD 0 0    ; @body")
    lines.append("  RTN")
    lines.append("")
    lines.append("  RTN    ; @done")
    lines.append("SEL @body @step1")

    return "\n".join(lines) + "\n"

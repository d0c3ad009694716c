#!/usr/bin/env python3
"""
Complete Pipeline Demo: Source → Program → Analysis → Output

Shows the full workflow:
1. Parse a program with labels
2. Analyze label usage
3. Resolve references
4. Generate a Graphviz diagram
"""

from labelpp.examples import build_countdown_source
from labelpp.parser import parse_program
from labelpp.analyzer import analyze_program
from labelpp.resolver import resolve
from labelpp.backends import DotMode, save_dot_file


def main():
    source = build_countdown_source(3)

    print("=" * 80)
    print("PIPELINE DEMO: Source → Program → Analysis → Output")
    print("=" * 80)

    print("\n1. PARSING...")
    program = parse_program(source)
    print(f"   ✓ Canonical lines: {len(program.lines)}")
    print(f"   ✓ Labels: {program.labels}")

    print("\n2. ANALYZING...")
    report = analyze_program(program)
    print(f"   ✓ Instructions: {report.opcode_counts}")
    print(f"   ✓ Forward references: {report.forward_references}")
    print(f"   ✓ Backward references: {report.backward_references}")
    for warning in report.warnings:
        print(f"      - {warning}")

    print("\n3. RESOLVING...")
    result = resolve(program)
    if not result.ok:
        print(f"   ✗ {result.error}")
        return
    for line in result.output.splitlines():
        print(f"   {line}")

    print("\n4. GENERATING DIAGRAM...")
    save_dot_file(program, "program.dot", mode=DotMode.DETAILED)
    print("   ✓ Saved program.dot")
    print("\n  dot -Tpng program.dot -o program.png")


if __name__ == "__main__":
    main()

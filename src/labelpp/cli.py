"""
Command line entry point: read a program, write it with labels resolved.

    labelpp [file] [-o file] [-l file] [--dot file] [--strict] [--report]

Reads standard input when no file is given and writes standard output
when no -o is given. Nothing is written if any label fails to resolve.
"""

import argparse
import os
import sys

from labelpp.parser import PreprocessError, parse_program
from labelpp.resolver import resolve
from labelpp.analyzer import analyze_program
from labelpp.serialization import labels_to_json, labels_to_yaml
from labelpp.backends import DotMode, save_dot_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labelpp",
        description="Resolve @label references in LDF/TSEL/SEL instructions.")
    parser.add_argument("file", nargs="?", help="source file (default: stdin)")
    parser.add_argument("-o", "--output", metavar="file", help="output file (default: stdout)")
    parser.add_argument("-l", "--labels", metavar="file",
                        help="write the label table (.yaml/.yml for YAML, JSON otherwise)")
    parser.add_argument("--dot", metavar="file", help="write the reference graph as Graphviz DOT")
    parser.add_argument("--strict", action="store_true",
                        help="reject duplicate label declarations")
    parser.add_argument("--report", action="store_true",
                        help="print analysis warnings to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.file is None:
        source = sys.stdin.read()
    else:
        with open(args.file, newline="") as in_file:
            source = in_file.read()

    try:
        program = parse_program(source, strict=args.strict)
    except PreprocessError as e:
        print(f"labelpp: {e}", file=sys.stderr)
        return 1

    if args.report:
        for warning in analyze_program(program).warnings:
            print(f"labelpp: warning: {warning}", file=sys.stderr)

    result = resolve(program)
    if not result.ok:
        print(f"labelpp: {result.error}", file=sys.stderr)
        return 1

    if args.labels:
        ext = os.path.splitext(args.labels)[1].lower()
        dump = labels_to_yaml(program) if ext in (".yaml", ".yml") else labels_to_json(program)
        with open(args.labels, "w") as labels_file:
            labels_file.write(dump)

    if args.dot:
        save_dot_file(program, args.dot, mode=DotMode.DETAILED)

    if args.output is None:
        sys.stdout.write(result.output)
    else:
        with open(args.output, "w", newline="") as out_file:
            out_file.write(result.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

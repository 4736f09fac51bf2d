"""Command line front end: analyze a trace and answer depth queries."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .analysis import ProgramAnalysis, analyze_program
from .reader import TraceFormatError, read_ops_latency, read_program

_UINT_RANGE = 2**32
_QUERY_NUMBER = re.compile(r"(?:\s*[+-]?[0-9]+)?")

USAGE = (
    "Usage: dflow_calc <opcodes info. filename> <program filename> [<Query> <Query>...]\n"
    "\tQuery: [p|d]<program line#> - Report [dependency depth| dependencies of this inst.]\n"
    "Example: dflow_calc opcode.dat example1.in d4 d7 p12"
)


class QueryError(ValueError):
    """A query argument is malformed."""


def _query_number(query: str) -> int:
    text = query[1:]
    if not _QUERY_NUMBER.fullmatch(text):
        raise QueryError(f"Error: Invalid instruction number in the query: {query}")
    return int(text) % _UINT_RANGE if text.strip() else 0


def run_query(analysis: ProgramAnalysis, query: str) -> str:
    """Answer a ``p<n>`` (depth) or ``d<n>`` (dependencies) query as a report line."""
    kind = query[:1]
    if kind not in ("p", "d"):
        raise QueryError(f"Invalid query type '{kind}' in argument '{query}'")
    number = _query_number(query)
    if kind == "p":
        try:
            return f"getDepDepth({number})=={analysis.instruction_depth(number)}"
        except IndexError:
            return f"Error -1 for getDepDepth({number})"
    try:
        src1, src2 = analysis.instruction_deps(number)
    except IndexError:
        return f"Error -1 for getInstDeps({number})"
    return f"getInstDeps({number})=={{{src1},{src2}}}"


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(USAGE)
        return 1
    op_fname, prog_name, queries = args[0], args[1], args[2:]

    print(f"Reading the opcodes latency info from {op_fname} ... ", end="")
    try:
        latencies = read_ops_latency(op_fname)
    except OSError:
        print(f"ERROR: Failed opening {op_fname}")
        return 1
    except TraceFormatError as exc:
        print(f"ERROR: {exc}")
        return 1
    print(f"Got latency for {len(latencies)} opcodes")

    print(f"Reading the program file {prog_name} ... ", end="")
    try:
        program = read_program(prog_name)
    except OSError:
        print(f"ERROR: Failed opening the program file: {prog_name}")
        program = []
    except TraceFormatError as exc:
        print(f"ERROR: {exc}")
        program = []
    if not program:
        print(f"Error reading program file {prog_name}!")
        return 1
    print(f"Found {len(program)} instructions")

    try:
        analysis = analyze_program(latencies, program)
    except ValueError:
        print("Error on invocation to analyzeCtx()")
        return 2
    print(f"getProgDepth()=={analysis.program_depth()}")

    for query in queries:
        try:
            print(run_query(analysis, query))
        except QueryError as exc:
            print(exc)
            return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
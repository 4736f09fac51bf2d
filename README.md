# dflowcalc

Analyse the dataflow of an executed instruction trace: find which earlier
instruction each source operand depends on, how many clock cycles each
instruction has to wait for its inputs, and how long the longest
dependency chain through the whole program is.

## Input files

**Opcode latency file**: one decimal number per line. Line *n* (counting
from 0) is the latency of opcode *n*. A blank line counts as latency 0, and
negative values are rejected. At most 32 lines are allowed; opcodes that are
not listed have latency 0.

```
1
3
5
```

**Program trace file**: one instruction per line, four decimal numbers:
`opcode dst src1 src2`. Fields are separated by spaces or tabs; anything
after the fourth field is ignored. Blank lines and lines starting with `#`
are skipped. Opcodes must be in the range 0–31 and register indices in the
range 0–31.

```
# op dst src1 src2
0 1 2 3
1 4 1 1
2 5 4 1
```

## Command line

```
dflow-calc <opcodes file> <program file> [query ...]
```

The program depth (longest path from entry to exit) is always reported.
Each query is a letter followed by an instruction number:

- `p<n>`: dependency depth of instruction *n* (cycles from program entry
  until its inputs are ready)
- `d<n>`: the instructions that the two sources of instruction *n* depend on
  (`-1` means program entry)

```
$ dflow-calc opcode.dat example1.in d4 d7 p12
```

A query for an instruction number outside the program prints an
`Error -1 for ...` line and the remaining queries still run. The exit status
is 1 for missing arguments or unreadable/malformed input files (an empty
program counts as an error), 2 if the trace has an opcode or register out of
range, 3 for a malformed query, and 0 otherwise.

## Library use

```python
from dflowcalc.analysis import Instruction, analyze_program
from dflowcalc.reader import read_ops_latency, read_program

latencies = read_ops_latency("opcode.dat")
trace = read_program("example1.in")
analysis = analyze_program(latencies, trace)

print(analysis.program_depth())
print(analysis.instruction_depth(2))
print(analysis.instruction_deps(2))   # (src1 producer, src2 producer)
print(len(analysis))                  # number of instructions
```

- `dflowcalc.analysis`: `Instruction(opcode, dst, src1, src2)`,
  `analyze_program(ops_latency, trace)` returning a `ProgramAnalysis`, whose
  `nodes` are `InstructionNode(parent1, parent2, latency, depth)` values
  (`finish` is `depth + latency`). `analyze_program` raises `ValueError` for
  more than 32 latencies, negative latencies, or opcodes and registers out of
  range. `instruction_depth` and `instruction_deps` raise `IndexError` for an
  index outside the program.
- `dflowcalc.reader`: `parse_program(lines, source)` and
  `parse_ops_latency(lines, source)` parse any iterable of lines;
  `read_program(filename)` and `read_ops_latency(filename)` read files.
  Malformed input raises `TraceFormatError` (a `ValueError`).
- `dflowcalc.cli`: `run_query(analysis, query)` returns the report line for
  one query and raises `QueryError` for a malformed one; `main(argv=None)`
  is the `dflow-calc` command.

## Running the tests

```
pip install -e .[test]
pytest
```
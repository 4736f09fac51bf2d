import pytest

from dflowcalc.analysis import MAX_OPS, Instruction
from dflowcalc.reader import (
    TraceFormatError,
    parse_ops_latency,
    parse_program,
    read_ops_latency,
    read_program,
)


def test_parse_program_skips_comments_and_blank_lines():
    lines = ["# header\n", "\n", "   \t\n", "0 1 2 3\n", "  # indented comment\n", "4\t5 6 7\r\n"]
    assert parse_program(lines) == [Instruction(0, 1, 2, 3), Instruction(4, 5, 6, 7)]


def test_parse_program_ignores_extra_fields():
    assert parse_program(["1 2 3 4 5 6\n"]) == [Instruction(1, 2, 3, 4)]


def test_parse_program_accepts_signs():
    assert parse_program(["+1 2 3 4"]) == [Instruction(1, 2, 3, 4)]


def test_parse_program_too_few_fields():
    with pytest.raises(TraceFormatError, match="Error parsing instruction #1 of prog"):
        parse_program(["0 1 2 3\n", "0 1 2\n"], "prog")


@pytest.mark.parametrize("line", ["0 1 x 3\n", "0 1 2 3a\n", "0 1.5 2 3\n"])
def test_parse_program_bad_field(line):
    with pytest.raises(TraceFormatError, match="Failed parsing field"):
        parse_program([line], "prog")


def test_read_program_round_trip(tmp_path):
    trace = [Instruction(3, 1, 0, 2), Instruction(0, 2, 1, 1)]
    path = tmp_path / "example.in"
    path.write_text("".join(f"{i.opcode} {i.dst} {i.src1} {i.src2}\n" for i in trace))
    assert read_program(str(path)) == trace


def test_read_program_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_program(str(tmp_path / "missing.in"))


def test_parse_ops_latency_values():
    assert parse_ops_latency(["1\n", "  3  \n", "12\n"]) == [1, 3, 12]


def test_parse_ops_latency_blank_line_is_zero():
    assert parse_ops_latency(["4\n", "\n", "2\n"]) == [4, 0, 2]


def test_parse_ops_latency_limit():
    assert len(parse_ops_latency(["1\n"] * MAX_OPS)) == MAX_OPS
    with pytest.raises(TraceFormatError, match="more opcodes than maximum"):
        parse_ops_latency(["1\n"] * (MAX_OPS + 1))


@pytest.mark.parametrize("line", ["abc\n", "3 4\n", "2x\n", "-1\n"])
def test_parse_ops_latency_bad_line(line):
    with pytest.raises(TraceFormatError, match="line 2 of lat"):
        parse_ops_latency(["1\n", line], "lat")


def test_read_ops_latency_round_trip(tmp_path):
    latencies = [1, 5, 2, 9]
    path = tmp_path / "opcode.dat"
    path.write_text("\n".join(str(v) for v in latencies) + "\n")
    assert read_ops_latency(str(path)) == latencies
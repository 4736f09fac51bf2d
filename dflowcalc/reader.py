"""Readers for opcode latency files and program trace files."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .analysis import MAX_OPS, Instruction

_TOKEN_SEPARATORS = re.compile(r"[ \t\n\r]+")
_INTEGER = re.compile(r"\s*[+-]?[0-9]+")
_LATENCY_LINE = re.compile(r"\s*([+-]?[0-9]+)?\s*")


class TraceFormatError(ValueError):
    """A latency or program file could not be parsed."""


def _parse_int(token: str) -> int | None:
    return int(token) if _INTEGER.fullmatch(token) else None


def parse_program(lines: Iterable[str], source: str = "<program>") -> list[Instruction]:
    """Parse ``op dst src1 src2`` lines; blank lines and ``#`` comments are skipped."""
    program: list[Instruction] = []
    for line in lines:
        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        tokens = [token for token in _TOKEN_SEPARATORS.split(stripped) if token]
        if len(tokens) < 4:
            raise TraceFormatError(
                f"Error parsing instruction #{len(program)} of {source}"
            )
        values = []
        for field, token in enumerate(tokens[:4]):
            value = _parse_int(token)
            if value is None:
                raise TraceFormatError(
                    f"Failed parsing field {field} of line #{len(program)} of "
                    f"{source}: {line.rstrip(chr(10))}"
                )
            values.append(value)
        program.append(Instruction(*values))
    return program


def read_program(filename: str) -> list[Instruction]:
    """Read a program trace file."""
    with open(filename, encoding="utf-8") as handle:
        return parse_program(handle, filename)


def parse_ops_latency(lines: Iterable[str], source: str = "<latency>") -> list[int]:
    """Parse one latency per line, opcode 0 first; a blank line means 0."""
    latencies: list[int] = []
    for line in lines:
        if len(latencies) >= MAX_OPS:
            raise TraceFormatError(
                "Opcodes latency file has more opcodes than maximum supported"
            )
        match = _LATENCY_LINE.fullmatch(line)
        value = int(match.group(1)) if match and match.group(1) else 0
        if match is None or value < 0:
            raise TraceFormatError(
                f"Failed parsing opcode latency at line {len(latencies) + 1} of {source}"
            )
        latencies.append(value)
    return latencies


def read_ops_latency(filename: str) -> list[int]:
    """Read an opcode latency file."""
    with open(filename, encoding="utf-8") as handle:
        return parse_ops_latency(handle, filename)
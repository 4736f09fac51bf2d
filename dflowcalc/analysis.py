"""Dataflow dependency analysis of an instruction trace."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MAX_OPS = 32
NUM_REGISTERS = 32
NO_DEPENDENCY = -1


@dataclass(frozen=True)
class Instruction:
    """One traced instruction: opcode, destination and two source registers."""

    opcode: int
    dst: int
    src1: int
    src2: int


@dataclass(frozen=True)
class InstructionNode:
    """Analysis result for one instruction of the trace."""

    parent1: int
    parent2: int
    latency: int
    depth: int

    @property
    def finish(self) -> int:
        """Clock cycle at which the instruction's result is available."""
        return self.depth + self.latency


class ProgramAnalysis:
    """Queryable dataflow graph built by :func:`analyze_program`."""

    def __init__(self, nodes: Iterable[InstructionNode]) -> None:
        self._nodes: tuple[InstructionNode, ...] = tuple(nodes)

    @property
    def nodes(self) -> tuple[InstructionNode, ...]:
        return self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def _node(self, index: int) -> InstructionNode:
        if not 0 <= index < len(self._nodes):
            raise IndexError(
                f"instruction index {index} out of range for a program of "
                f"{len(self._nodes)} instructions"
            )
        return self._nodes[index]

    def instruction_depth(self, index: int) -> int:
        """Cycles from program entry until the instruction can start."""
        return self._node(index).depth

    def instruction_deps(self, index: int) -> tuple[int, int]:
        """Indices of the instructions feeding src1 and src2 (-1 for entry)."""
        node = self._node(index)
        return node.parent1, node.parent2

    def program_depth(self) -> int:
        """Length in cycles of the longest path from entry to exit."""
        return max((node.finish for node in self._nodes), default=0)


def _check_register(position: int, name: str, value: int) -> None:
    if not 0 <= value < NUM_REGISTERS:
        raise ValueError(
            f"instruction {position}: register {name}={value} outside "
            f"0..{NUM_REGISTERS - 1}"
        )


def analyze_program(
    ops_latency: Sequence[int], trace: Iterable[Instruction]
) -> ProgramAnalysis:
    """Build the dependency graph of ``trace`` given per-opcode latencies.

    Opcodes below ``MAX_OPS`` with no entry in ``ops_latency`` take latency 0.
    """
    latencies = list(ops_latency)
    if len(latencies) > MAX_OPS:
        raise ValueError(f"at most {MAX_OPS} opcode latencies are supported")
    if any(latency < 0 for latency in latencies):
        raise ValueError("opcode latencies must not be negative")

    last_writer = [NO_DEPENDENCY] * NUM_REGISTERS
    nodes: list[InstructionNode] = []

    def finish_of(parent: int) -> int:
        return 0 if parent == NO_DEPENDENCY else nodes[parent].finish

    for position, inst in enumerate(trace):
        if not 0 <= inst.opcode < MAX_OPS:
            raise ValueError(
                f"instruction {position}: opcode {inst.opcode} outside 0..{MAX_OPS - 1}"
            )
        _check_register(position, "dst", inst.dst)
        _check_register(position, "src1", inst.src1)
        _check_register(position, "src2", inst.src2)

        latency = latencies[inst.opcode] if inst.opcode < len(latencies) else 0
        parent1 = last_writer[inst.src1]
        parent2 = last_writer[inst.src2]
        last_writer[inst.dst] = position
        depth = max(finish_of(parent1), finish_of(parent2))
        nodes.append(InstructionNode(parent1, parent2, latency, depth))

    return ProgramAnalysis(nodes)
"""Programs and the control blocks the scheduler keeps for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from cpusched.operation import Operation, OperationType, parse_operation

MAX_OPERATIONS = 100


class ProcessState(Enum):
    """Life-cycle state of a process."""

    CREATE = auto()
    READY = auto()
    RUNNING = auto()
    WAITING = auto()
    TERMINATED = auto()


@dataclass(frozen=True)
class Process:
    """A program: its instructions and its data word."""

    operations: tuple[Operation, ...]
    data: int = 0

    def __len__(self) -> int:
        return len(self.operations)

    def cpu_burst_time(self) -> int:
        """Number of CPU instructions, one time unit each."""
        return sum(op.type is OperationType.CPU for op in self.operations)


def parse_program(text: str) -> Process:
    """Parse program text, one instruction per line."""
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    if len(lines) > MAX_OPERATIONS:
        raise ValueError(
            f"program has {len(lines)} operations, at most {MAX_OPERATIONS} allowed"
        )
    return Process(tuple(parse_operation(line) for line in lines))


@dataclass
class ProcessControlBlock:
    """Bookkeeping the scheduler keeps for one process."""

    pid: int
    process: Process
    priority: int = 0
    program_counter: int = 0
    state: ProcessState = ProcessState.CREATE
    register_backup: int = 0
    turnaround_time: int = 0
    waiting_time: int = 0
    arrive_time: int | None = None
    last_ready_queue_inserted_time: int = 0
    executed_time: int = field(default=0)
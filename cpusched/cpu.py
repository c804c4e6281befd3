"""A single simulated processor core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from cpusched.operation import Operation, OperationType
from cpusched.process import Process

REG_CNT = 1
DATA_LOAD_TIME = 3


class CpuState(Enum):
    """What the core did with its last instruction."""

    COMPUTATION = auto()
    IO = auto()
    IDLE = auto()
    RETURN = auto()


@dataclass
class Cpu:
    """Core that steps through the instructions of one process."""

    reg: int = 0
    program_counter: int = 0
    state: CpuState = CpuState.IDLE
    current_process: Process | None = None
    end_time: int = 0

    def fetch_next_operation(self) -> Operation:
        """Return the instruction at the program counter."""
        if self.current_process is None:
            raise RuntimeError("no process loaded on the core")
        operations = self.current_process.operations
        if not 0 <= self.program_counter < len(operations):
            raise IndexError(
                f"program counter {self.program_counter} past end of program"
            )
        return operations[self.program_counter]

    def execute_operation(self, now: int) -> Operation:
        """Execute the next instruction at time ``now`` and return it."""
        op = self.fetch_next_operation()
        self.program_counter += 1
        if op.type is OperationType.CPU:
            self.state = CpuState.COMPUTATION
        elif op.type is OperationType.MEM:
            self.state = CpuState.IO
            self.end_time = now + op.src
        else:
            self.current_process = None
            self.state = CpuState.RETURN
        return op
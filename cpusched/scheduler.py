"""Discrete-time CPU scheduling simulation."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from cpusched.cpu import Cpu, CpuState
from cpusched.operation import OperationType
from cpusched.process import ProcessControlBlock, ProcessState
from cpusched.queues import FifoQueue, PriorityQueue

READY_QUEUE_CAPACITY = 100
WAITING_QUEUE_CAPACITY = 20

ReadyQueue = Union[
    FifoQueue[ProcessControlBlock], PriorityQueue[ProcessControlBlock]
]


@dataclass(frozen=True)
class DispatchRecord:
    """A process being given the core at a point in time."""

    time: int
    pid: int


@dataclass(frozen=True)
class SimulationResult:
    """Totals gathered over one run of a scheduler."""

    end_time: int
    total_waiting_time: int
    total_turnaround_time: int
    process_count: int
    dispatches: tuple[DispatchRecord, ...]

    @property
    def average_waiting_time(self) -> float:
        if not self.process_count:
            return math.nan
        return self.total_waiting_time / self.process_count

    @property
    def average_turnaround_time(self) -> float:
        if not self.process_count:
            return math.nan
        return self.total_turnaround_time / self.process_count


@dataclass
class _Job:
    target_time: int
    pcb: ProcessControlBlock


def _priority_key(pcb: ProcessControlBlock) -> tuple[int, int]:
    return (pcb.priority, pcb.pid)


def _job_key(job: _Job) -> tuple[int, int]:
    return (job.target_time, job.pcb.pid)


class Scheduler:
    """Non-preemptive scheduler, optionally with a time quantum.

    The order in which ready processes run is decided by ``ready_queue``.
    A ``time_quantum`` of None means a process keeps the core until it
    finishes or waits for memory.
    """

    def __init__(self, ready_queue: ReadyQueue, time_quantum: int | None = None) -> None:
        if time_quantum is not None and time_quantum < 1:
            raise ValueError("time quantum must be positive")
        self.ready_queue = ready_queue
        self.waiting_queue: PriorityQueue[_Job] = PriorityQueue(
            WAITING_QUEUE_CAPACITY, _job_key
        )
        self.core = Cpu()
        self.current_pcb: ProcessControlBlock | None = None
        self.time_quantum = time_quantum
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.process_count = 0
        self.now = 0
        self.dispatches: list[DispatchRecord] = []
        self._slice_time = 0

    def add_waiting_queue(self, pcb: ProcessControlBlock, target_time: int) -> None:
        """Schedule ``pcb`` to become ready at ``target_time``."""
        if self.waiting_queue.is_full():
            raise OverflowError("waiting queue is full")
        pcb.program_counter = self.core.program_counter
        if pcb.arrive_time is None:
            pcb.arrive_time = target_time
            self.process_count += 1
        self.waiting_queue.enqueue(_Job(target_time, pcb))

    def _enqueue_ready(self, pcb: ProcessControlBlock) -> None:
        pcb.last_ready_queue_inserted_time = self.now
        pcb.state = ProcessState.READY
        if not self.ready_queue.enqueue(pcb):
            raise OverflowError("ready queue is full")

    def add_ready_queue(self, pcb: ProcessControlBlock) -> None:
        """Put ``pcb`` in the ready queue."""
        self._enqueue_ready(pcb)

    def _arrivals(self) -> Iterator[ProcessControlBlock]:
        while (job := self.waiting_queue.peek()) is not None and job.target_time <= self.now:
            self.waiting_queue.dequeue()
            yield job.pcb

    def exit_process(self) -> None:
        """Terminate the running process and account for its times."""
        pcb = self.current_pcb
        if pcb is None:
            raise RuntimeError("no process is running")
        self.core.state = CpuState.IDLE
        pcb.state = ProcessState.TERMINATED
        pcb.turnaround_time = self.now - (pcb.arrive_time or 0)
        self.current_pcb = None
        self.total_waiting_time += pcb.waiting_time
        self.total_turnaround_time += pcb.turnaround_time

    def dispatch(self) -> ProcessControlBlock | None:
        """Return the running process to the ready queue and run the next one."""
        self._slice_time = 0
        pcb = self.current_pcb
        if pcb is not None:
            pcb.program_counter = self.core.program_counter
            self._enqueue_ready(pcb)

        next_pcb = self.ready_queue.dequeue()
        if next_pcb is None:
            return None
        next_pcb.waiting_time += self.now - next_pcb.last_ready_queue_inserted_time
        next_pcb.state = ProcessState.RUNNING
        self.core.program_counter = next_pcb.program_counter
        self.core.current_process = next_pcb.process
        self.current_pcb = next_pcb
        self.dispatches.append(DispatchRecord(self.now, next_pcb.pid))
        return next_pcb

    def _execute_cpu(self) -> None:
        core = self.core
        pcb = self.current_pcb
        assert pcb is not None
        core.execute_operation(self.now)
        if core.state is CpuState.COMPUTATION:
            self.now += 1
            self._slice_time += 1
            pcb.executed_time += 1
        elif core.state is CpuState.IO:
            self.add_waiting_queue(pcb, core.end_time)
            self.current_pcb = None
            core.state = CpuState.IDLE
        elif core.state is CpuState.RETURN:
            self.exit_process()

    def run_timestep(self) -> None:
        """Advance the simulation by one step."""
        for pcb in self._arrivals():
            self.add_ready_queue(pcb)

        if self.current_pcb is None and not self.ready_queue.is_empty():
            self.dispatch()

        if self.current_pcb is None:
            self.now += 1
            self._slice_time += 1
            return

        if self.time_quantum is not None and self._slice_time == self.time_quantum:
            if self.core.fetch_next_operation().type is OperationType.RET:
                self.core.execute_operation(self.now)
                self.exit_process()
            self.dispatch()
            return

        self._execute_cpu()

    def start(self) -> SimulationResult:
        """Run until every process has finished."""
        self.now = 0
        self._slice_time = 0
        while (
            not self.ready_queue.is_empty()
            or not self.waiting_queue.is_empty()
            or self.current_pcb is not None
        ):
            self.run_timestep()
        return SimulationResult(
            end_time=self.now,
            total_waiting_time=self.total_waiting_time,
            total_turnaround_time=self.total_turnaround_time,
            process_count=self.process_count,
            dispatches=tuple(self.dispatches),
        )


class PriorityPreemptiveScheduler(Scheduler):
    """Priority scheduler that preempts when a better process becomes ready."""

    def __init__(self) -> None:
        super().__init__(PriorityQueue(READY_QUEUE_CAPACITY, _priority_key))

    def _should_preempt(self) -> bool:
        next_pcb = self.ready_queue.peek()
        current = self.current_pcb
        return (
            current is not None
            and next_pcb is not None
            and current.priority > next_pcb.priority
        )

    def add_ready_queue(self, pcb: ProcessControlBlock) -> None:
        self._enqueue_ready(pcb)
        if self._should_preempt():
            self.dispatch()


class SjfPreemptiveScheduler(PriorityPreemptiveScheduler):
    """Shortest-remaining-time-first; priority holds the remaining burst."""

    def add_ready_queue(self, pcb: ProcessControlBlock) -> None:
        self._enqueue_ready(pcb)
        if self._should_preempt():
            current = self.current_pcb
            assert current is not None
            current.priority -= current.executed_time
            current.executed_time = 0
            self.dispatch()


def fcfs_scheduler() -> Scheduler:
    """First come, first served."""
    return Scheduler(FifoQueue(READY_QUEUE_CAPACITY))


def priority_non_preemptive_scheduler() -> Scheduler:
    """Lowest priority value runs first, without preemption."""
    return Scheduler(PriorityQueue(READY_QUEUE_CAPACITY, _priority_key))


def sjf_non_preemptive_scheduler() -> Scheduler:
    """Shortest job first; the priority of each process is its burst time."""
    return priority_non_preemptive_scheduler()


def priority_preemptive_scheduler() -> Scheduler:
    """Lowest priority value runs first, with preemption."""
    return PriorityPreemptiveScheduler()


def sjf_preemptive_scheduler() -> Scheduler:
    """Shortest remaining time first."""
    return SjfPreemptiveScheduler()


def round_robin_scheduler(time_quantum: int) -> Scheduler:
    """Round robin with the given time quantum."""
    return Scheduler(FifoQueue(READY_QUEUE_CAPACITY), time_quantum)
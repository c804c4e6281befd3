"""Command line entry point: simulate scheduling of program files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from cpusched.process import ProcessControlBlock, parse_program
from cpusched.scheduler import (
    Scheduler,
    SimulationResult,
    fcfs_scheduler,
    priority_non_preemptive_scheduler,
    priority_preemptive_scheduler,
    round_robin_scheduler,
    sjf_non_preemptive_scheduler,
    sjf_preemptive_scheduler,
)

DEFAULT_PROGRAMS = ("p1", "p2", "p3", "p4", "p5")
DEFAULT_PRIORITIES = (4, 3, 2, 1, 4)

_FIXED_SCHEDULERS: dict[str, Callable[[], Scheduler]] = {
    "fcfs": fcfs_scheduler,
    "sjf": sjf_non_preemptive_scheduler,
    "sjf-preemptive": sjf_preemptive_scheduler,
    "priority": priority_non_preemptive_scheduler,
    "priority-preemptive": priority_preemptive_scheduler,
}
_SJF = {"sjf", "sjf-preemptive"}


def read_program(path: str | Path) -> str:
    """Return the text of a program file."""
    return Path(path).read_text()


def _format_report(result: SimulationResult) -> str:
    chart = "".join(f"{r.time} - pid:{r.pid} - " for r in result.dispatches)
    return (
        f"{chart}{result.end_time}\n"
        f"average waiting time : {result.average_waiting_time:.6f}\n"
        f"average turnaround time : {result.average_turnaround_time:.6f}\n"
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Simulate CPU scheduling of program files."
    )
    parser.add_argument(
        "programs",
        nargs="*",
        default=list(DEFAULT_PROGRAMS),
        help="program files; the n-th file arrives at time n",
    )
    parser.add_argument(
        "--scheduler",
        choices=[*_FIXED_SCHEDULERS, "rr"],
        default="priority-preemptive",
    )
    parser.add_argument("--quantum", type=int, help="time quantum for rr")
    parser.add_argument(
        "--priorities", type=int, nargs="+", help="one priority per program"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.scheduler == "rr":
        if args.quantum is None:
            parser.error("--scheduler rr needs --quantum")
        if args.quantum < 1:
            parser.error("--quantum must be positive")
    if args.priorities is not None and len(args.priorities) != len(args.programs):
        parser.error("give exactly one priority per program")

    try:
        processes = [parse_program(read_program(path)) for path in args.programs]
    except OSError as exc:
        print(f"cannot open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid program: {exc}", file=sys.stderr)
        return 1

    if args.priorities is not None:
        priorities = list(args.priorities)
    elif args.scheduler in _SJF:
        priorities = [process.cpu_burst_time() for process in processes]
    elif len(processes) == len(DEFAULT_PRIORITIES):
        priorities = list(DEFAULT_PRIORITIES)
    else:
        priorities = [0] * len(processes)

    if args.scheduler == "rr":
        scheduler = round_robin_scheduler(args.quantum)
    else:
        scheduler = _FIXED_SCHEDULERS[args.scheduler]()

    try:
        for arrival, (process, priority) in enumerate(zip(processes, priorities)):
            pcb = ProcessControlBlock(pid=arrival + 1, process=process, priority=priority)
            scheduler.add_waiting_queue(pcb, arrival)
        result = scheduler.start()
    except (IndexError, OverflowError, RuntimeError) as exc:
        print(f"simulation failed: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(_format_report(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# cpusched

`cpusched` simulates one CPU core running a set of small programs under a
choice of scheduling policies, one time unit at a time. When every process
has finished, it reports the dispatch order, the finishing time, and the
average waiting and turnaround times.

## Program files

A program is a plain text file with one operation per line:

```
CPU reg1 10
MEM reg1 100
CPU reg1 5
RET
```

- `CPU` takes one time unit of computation. The register and the number are
  read but have no effect.
- `MEM` sends the process off to wait. The third word gives the number of
  time units the wait lasts. When the wait ends, the process goes back into
  the ready queue.
- `RET` ends the process. Any first word other than `CPU` or `MEM` is also
  read as `RET`.

A final trailing newline is ignored. An empty line in the middle of a
program is an error. A program may hold at most 100 operations.

## Command line

```
cpusched [PROGRAM ...] [--scheduler NAME] [--quantum N] [--priorities P ...]
```

- `PROGRAM`: the program files. The default is `p1 p2 p3 p4 p5` in the
  current directory. The n-th file (counting from 0) arrives at time n and
  gets pid n + 1.
- `--scheduler`: one of `fcfs`, `sjf`, `sjf-preemptive`, `priority`,
  `priority-preemptive` or `rr`. The default is `priority-preemptive`.
- `--quantum`: the time quantum. `rr` requires it, and it must be positive.
- `--priorities`: one integer per program. A lower value runs sooner.

Priorities are chosen as follows:

1. If `--priorities` is given, those values are used.
2. Otherwise, `sjf` and `sjf-preemptive` use each program's number of `CPU`
   operations.
3. Otherwise, exactly five programs get `4 3 2 1 4`.
4. Any other number of programs all get priority 0.

The output is a single line with one `TIME - pid:PID - ` entry for each
dispatch, followed by the finishing time. Two more lines follow:

```
average waiting time : 2.400000
average turnaround time : 7.000000
```

The command exits with status 1 in these cases:

- a file cannot be read;
- a program is invalid;
- the simulation fails, for example when the waiting queue (20 jobs) or the
  ready queue (100 processes) overflows.

## Library use

- `cpusched.operation`:
  - `parse_operation(line)` returns an `Operation`, which holds an
    `OperationType` and an operand `src`.
- `cpusched.process`:
  - `parse_program(text)` returns a `Process`.
  - `Process.cpu_burst_time()` counts its `CPU` operations.
  - A `ProcessControlBlock` holds a process together with its pid, priority,
    state (`ProcessState`) and timing fields.
- `cpusched.queues`: bounded queues.
  - `FifoQueue(capacity)`.
  - `PriorityQueue(capacity, key)`, which gives back the item with the
    smallest key first.
  - On both queues, `enqueue` returns False when the queue is full, and
    `dequeue` and `peek` return None when it is empty.
- `cpusched.cpu`:
  - `Cpu` steps through a process's operations with
    `fetch_next_operation()` and `execute_operation(now)`.
- `cpusched.scheduler`: the simulation. These factories build schedulers:
  - `fcfs_scheduler()`: first come, first served.
  - `sjf_non_preemptive_scheduler()`: shortest job first, without
    preemption. The priority field holds the burst time.
  - `sjf_preemptive_scheduler()`: shortest remaining time first.
  - `priority_non_preemptive_scheduler()`: by priority, without preemption.
  - `priority_preemptive_scheduler()`: by priority, with preemption.
  - `round_robin_scheduler(time_quantum)`: round robin.

In the priority and SJF policies, ties go to the lower pid.

To run a simulation, hand each `ProcessControlBlock` to
`Scheduler.add_waiting_queue(pcb, arrival_time)`, then call
`Scheduler.start()`. It returns a `SimulationResult`, which holds:

- `end_time`;
- the totals `total_waiting_time` and `total_turnaround_time`;
- `process_count`;
- `dispatches`, a tuple of `DispatchRecord(time, pid)`;
- the properties `average_waiting_time` and `average_turnaround_time`. These
  are NaN when no process ran.

```python
from cpusched.process import ProcessControlBlock, parse_program
from cpusched.scheduler import round_robin_scheduler

scheduler = round_robin_scheduler(2)
programs = ["CPU r1 1\nCPU r1 1\nCPU r1 1\nRET", "CPU r1 1\nRET"]
for arrival, text in enumerate(programs):
    pcb = ProcessControlBlock(pid=arrival + 1, process=parse_program(text))
    scheduler.add_waiting_queue(pcb, arrival)

result = scheduler.start()
print(result.end_time, result.average_waiting_time)
print([(r.time, r.pid) for r in result.dispatches])
```

## Limits

The simulation covers a single core only. The operands of `CPU` operations,
the register names and a process's data word are carried along but never
computed with. The simulator does not draw a Gantt chart. It does not report
times for individual processes on the command line. Per-process times are
available on the `ProcessControlBlock` objects.

## Tests

```
pip install -e ".[test]"
pytest
```
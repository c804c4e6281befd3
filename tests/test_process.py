import pytest

from cpusched.operation import Operation, OperationType
from cpusched.process import (
    MAX_OPERATIONS,
    Process,
    ProcessControlBlock,
    ProcessState,
    parse_program,
)


def test_parse_program_keeps_order():
    process = parse_program("CPU reg1 1\nMEM reg1 3\nRET")
    assert [op.type for op in process.operations] == [
        OperationType.CPU,
        OperationType.MEM,
        OperationType.RET,
    ]
    assert process.operations[1].src == 3


def test_trailing_newline_ignored():
    assert parse_program("CPU reg1 1\nRET\n") == parse_program("CPU reg1 1\nRET")


def test_len_matches_line_count():
    lines = ["CPU reg1 1"] * 4 + ["RET"]
    assert len(parse_program("\n".join(lines))) == len(lines)


@pytest.mark.parametrize("cpu_count", [0, 1, 5, 20])
def test_cpu_burst_time_counts_cpu_lines(cpu_count):
    lines = ["CPU reg1 1"] * cpu_count + ["MEM reg1 10", "RET"]
    assert parse_program("\n".join(lines)).cpu_burst_time() == cpu_count


def test_cpu_burst_time_ignores_mem_operand():
    process = Process((Operation(OperationType.MEM, 50), Operation(OperationType.RET)))
    assert process.cpu_burst_time() == 0


def test_too_many_operations_rejected():
    text = "\n".join(["CPU reg1 1"] * (MAX_OPERATIONS + 1))
    with pytest.raises(ValueError):
        parse_program(text)


def test_max_operations_accepted():
    text = "\n".join(["CPU reg1 1"] * MAX_OPERATIONS)
    assert len(parse_program(text)) == MAX_OPERATIONS


def test_blank_line_rejected():
    with pytest.raises(ValueError):
        parse_program("CPU reg1 1\n\nRET")


def test_empty_program_rejected():
    with pytest.raises(ValueError):
        parse_program("")


def test_control_block_defaults():
    process = parse_program("RET")
    pcb = ProcessControlBlock(pid=7, process=process)
    assert pcb.state is ProcessState.CREATE
    assert pcb.arrive_time is None
    assert pcb.program_counter == 0
    assert pcb.waiting_time == 0
    assert pcb.executed_time == 0
    assert pcb.process is process
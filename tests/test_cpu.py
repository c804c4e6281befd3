import pytest

from cpusched.cpu import Cpu, CpuState
from cpusched.operation import OperationType
from cpusched.process import parse_program


def loaded(text):
    return Cpu(current_process=parse_program(text))


def test_new_core_is_idle():
    cpu = Cpu()
    assert cpu.state is CpuState.IDLE
    assert cpu.program_counter == 0
    assert cpu.current_process is None


def test_cpu_instruction_computes():
    cpu = loaded("CPU reg1 1\nRET")
    op = cpu.execute_operation(0)
    assert op.type is OperationType.CPU
    assert cpu.state is CpuState.COMPUTATION
    assert cpu.program_counter == 1


def test_mem_instruction_sets_end_time():
    cpu = loaded("MEM reg1 100\nRET")
    now = 7
    op = cpu.execute_operation(now)
    assert cpu.state is CpuState.IO
    assert cpu.end_time == now + op.src
    assert op.src == 100


def test_ret_unloads_process():
    cpu = loaded("RET")
    cpu.execute_operation(0)
    assert cpu.state is CpuState.RETURN
    assert cpu.current_process is None


def test_fetch_does_not_advance():
    cpu = loaded("MEM reg1 4\nRET")
    first = cpu.fetch_next_operation()
    assert cpu.fetch_next_operation() == first
    assert cpu.program_counter == 0


def test_runs_through_program():
    cpu = loaded("CPU reg1 1\nCPU reg1 1\nMEM reg1 2\nRET")
    states = []
    while cpu.current_process is not None:
        cpu.execute_operation(0)
        states.append(cpu.state)
    assert states == [
        CpuState.COMPUTATION,
        CpuState.COMPUTATION,
        CpuState.IO,
        CpuState.RETURN,
    ]


def test_fetch_without_process_fails():
    with pytest.raises(RuntimeError):
        Cpu().fetch_next_operation()


def test_fetch_past_end_fails():
    cpu = loaded("CPU reg1 1")
    cpu.execute_operation(0)
    with pytest.raises(IndexError):
        cpu.fetch_next_operation()
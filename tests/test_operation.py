import pytest

from cpusched.operation import Operation, OperationType, parse_operation


def test_cpu_line():
    assert parse_operation("CPU reg1 10") == Operation(OperationType.CPU, 10)


def test_mem_line():
    assert parse_operation("MEM reg1 100") == Operation(OperationType.MEM, 100)


def test_ret_line_has_no_operand():
    op = parse_operation("RET")
    assert op.type is OperationType.RET
    assert op.src == 0


def test_unknown_word_means_ret():
    assert parse_operation("NOP reg1 7").type is OperationType.RET


def test_repeated_spaces_are_skipped():
    assert parse_operation("CPU   reg1   5") == Operation(OperationType.CPU, 5)


def test_operand_reads_leading_digits():
    assert parse_operation("MEM reg1 12x").src == 12


def test_operand_trailing_carriage_return():
    assert parse_operation("MEM reg1 30\r") == Operation(OperationType.MEM, 30)


def test_non_numeric_operand_is_zero():
    assert parse_operation("CPU reg1 abc").src == parse_operation("RET").src


@pytest.mark.parametrize("line", ["", "   "])
def test_empty_line_rejected(line):
    with pytest.raises(ValueError):
        parse_operation(line)
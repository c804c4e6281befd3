"""Instructions that make up a simulated program."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class OperationType(Enum):
    """Kind of instruction a program can hold."""

    CPU = 0
    MEM = 1
    RET = 2


@dataclass(frozen=True)
class Operation:
    """One instruction: its kind and its operand (duration for MEM)."""

    type: OperationType
    src: int = 0


def _to_int(token: str) -> int:
    """Read a leading integer from ``token``; 0 when there is none."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


_KINDS = {"CPU": OperationType.CPU, "MEM": OperationType.MEM}


def parse_operation(line: str) -> Operation:
    """Parse a line such as ``CPU reg1 10``, ``MEM reg1 100`` or ``RET``.

    The second word names a register and is ignored; the third is the
    operand. Any first word other than CPU or MEM means RET.
    """
    tokens = [token for token in line.split(" ") if token]
    if not tokens:
        raise ValueError("empty operation line")
    kind = _KINDS.get(tokens[0], OperationType.RET)
    src = _to_int(tokens[2]) if len(tokens) > 2 else 0
    return Operation(kind, src)
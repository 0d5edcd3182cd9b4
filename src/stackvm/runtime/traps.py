from dataclasses import dataclass
from enum import Enum

from stackvm.common.instruction import Instruction


class Trap(Enum):
    NO_TRAP = 'No trap'
    STACK_OVERFLOW = 'Stack overflow'
    STACK_UNDERFLOW = 'Stack underflow'
    DIVISION_BY_ZERO = 'Division by zero'
    ILLEGAL_ACCESS = 'Illegal access'

    @property
    def message(self) -> str:
        return self.value


class MachineTrap(Exception):
    trap: Trap


class StackOverflow(MachineTrap):
    trap = Trap.STACK_OVERFLOW


class StackUnderflow(MachineTrap):
    trap = Trap.STACK_UNDERFLOW


class DivisionByZero(MachineTrap):
    trap = Trap.DIVISION_BY_ZERO


class IllegalAccess(MachineTrap):
    trap = Trap.ILLEGAL_ACCESS


@dataclass(frozen=True)
class Fault:
    trap: Trap
    ip: int
    instruction: Instruction | None  # None when the fetch itself failed

    def __str__(self):
        where = f'at {self.ip}'

        if self.instruction is not None:
            where += f' ({self.instruction})'

        return f'{self.trap.message} {where}'

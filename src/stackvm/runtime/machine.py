import logging as lg
from typing import Callable, List, Tuple

from stackvm.common.hwconf import STACK_CAPACITY
from stackvm.common.instruction import Instruction, Program, format_program
from stackvm.common.ops import Opcode
from stackvm.common.word import Word, ZERO
from stackvm.runtime.traps import (
    Trap, Fault, MachineTrap,
    StackOverflow, StackUnderflow, DivisionByZero, IllegalAccess
)


def truncdiv(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero()

    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


class Machine():
    capacity: int
    stack: List[Word]                # Fixed buffer, only [0, size) is live
    size: int
    program: Tuple[Instruction, ...]
    ip: Word                         # Instruction pointer
    halted: bool
    fault: Fault | None              # Context of the last trap

    def __init__(self, capacity: int = STACK_CAPACITY):
        self.capacity = capacity
        self.stack = [ZERO] * capacity
        self.size = 0

        self.program = ()
        self.ip = ZERO
        self.halted = False
        self.fault = None

    def load(self, program: Program):
        self.program = tuple(program)
        lg.info(f'Loaded {len(self.program)} instructions')
        lg.debug(f'Program:\n{format_program(self.program)}')

    # - Stack - #

    def push(self, word: Word):
        if self.size == self.capacity:
            raise StackOverflow()

        self.stack[self.size] = word
        self.size += 1

    def pop(self) -> Word:
        if self.size == 0:
            raise StackUnderflow()

        self.size -= 1
        return self.stack[self.size]

    def peek(self, depth: int) -> Word:
        if depth < 0 or depth >= self.size:
            raise IllegalAccess()

        return self.stack[self.size - 1 - depth]

    def live(self) -> List[Word]:
        return self.stack[:self.size]

    # - Helpers - #

    def dump(self) -> str:
        lines = ['Stack dump']

        if self.size == 0:
            lines.append('Empty')
        else:
            lines.extend(f'{i}: {w}' for i, w in enumerate(self.live()))

        return '\n'.join(lines)

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'IP': self.ip,
            'SZ': self.size,
            'HLT': int(self.halted)
        }.items()]

        if self.size > 0:
            state.append(f'TOP:{self.stack[self.size - 1]}')

        lg.debug(' '.join(state))

    def advance(self):
        self.ip = Word.wrap(self.ip.value + 1)

    def branch(self, target: Word):
        self.ip = target

    def arithm_pair(self, op: Callable[[int, int], int]):
        self.advance()
        a = self.pop()
        b = self.pop()
        self.push(Word.wrap(op(a.value, b.value)))

    # - Operations - #

    def op_push(self, operand: Word):
        self.advance()
        self.push(operand)

    def op_pop(self, operand: Word):
        self.advance()
        self.pop()

    def op_dup(self, operand: Word):
        self.advance()
        self.push(self.peek(operand.value))

    def op_jmp(self, operand: Word):
        self.branch(operand)

    def op_jnz(self, operand: Word):
        condition = self.pop()

        if condition.value != 0:
            self.branch(operand)
        else:
            self.advance()

    def op_jeq(self, operand: Word):
        if self.size < 2:
            raise StackUnderflow()

        if self.peek(0) == self.peek(1):
            self.branch(operand)
        else:
            self.advance()

        self.pop()

    def op_hlt(self, operand: Word):
        self.halted = True

    # - Arithmetic - #

    def op_plus(self, operand: Word):
        self.arithm_pair(lambda a, b: a + b)

    def op_minus(self, operand: Word):
        self.arithm_pair(lambda a, b: a - b)

    def op_mult(self, operand: Word):
        self.arithm_pair(lambda a, b: a * b)

    def op_div(self, operand: Word):
        self.arithm_pair(truncdiv)

    HANDLERS = {
        Opcode.PUSH: op_push,
        Opcode.POP: op_pop,
        Opcode.DUP: op_dup,
        Opcode.PLUS: op_plus,
        Opcode.MINUS: op_minus,
        Opcode.MULT: op_mult,
        Opcode.DIV: op_div,
        Opcode.JMP: op_jmp,
        Opcode.JNZ: op_jnz,
        Opcode.JEQ: op_jeq,
        Opcode.HLT: op_hlt,
    }

    # -- Implementation -- #

    def record_fault(self, trap: Trap, instruction: Instruction | None) -> Trap:
        self.fault = Fault(trap, self.ip.value, instruction)
        lg.debug(f'TRAP {self.fault}')
        return trap

    def execute(self) -> Trap:
        if self.halted:
            return Trap.NO_TRAP

        ip = self.ip

        if ip.value < 0 or ip.value >= len(self.program):
            return self.record_fault(Trap.ILLEGAL_ACCESS, None)

        inst = self.program[ip.value]
        handler = self.HANDLERS[inst.opcode]

        try:
            handler(self, inst.operand)
        except MachineTrap as e:
            # The faulting instruction stays current
            self.ip = ip
            return self.record_fault(e.trap, inst)

        lg.debug(f'{ip}: {inst}')
        self.debug_dump()
        return Trap.NO_TRAP


_unhandled = set(Opcode) - set(Machine.HANDLERS)

if _unhandled:
    raise RuntimeError(f'No handlers for {sorted(_unhandled)}')

from dataclasses import dataclass
from typing import Sequence

from stackvm.common.ops import Opcode, WITH_OPERAND
from stackvm.common.word import Word, ZERO, as_word


@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    operand: Word = ZERO

    def __post_init__(self):
        if not isinstance(self.opcode, Opcode):
            raise TypeError(f'Unknown opcode {self.opcode!r}')

        if not isinstance(self.operand, Word):
            raise TypeError(f'Operand must be a Word, got {self.operand!r}')

    def __str__(self):
        if self.opcode in WITH_OPERAND:
            return f'{self.opcode.mnemonic} {self.operand}'

        return self.opcode.mnemonic


Program = Sequence[Instruction]


# - Constructors - #

def push(value: int | Word):
    return Instruction(Opcode.PUSH, as_word(value))


def pop():
    return Instruction(Opcode.POP)


def dup(depth: int | Word):
    return Instruction(Opcode.DUP, as_word(depth))


def plus():
    return Instruction(Opcode.PLUS)


def minus():
    return Instruction(Opcode.MINUS)


def mult():
    return Instruction(Opcode.MULT)


def div():
    return Instruction(Opcode.DIV)


def jmp(target: int | Word):
    return Instruction(Opcode.JMP, as_word(target))


def jnz(target: int | Word):
    return Instruction(Opcode.JNZ, as_word(target))


def jeq(target: int | Word):
    return Instruction(Opcode.JEQ, as_word(target))


def hlt():
    return Instruction(Opcode.HLT)


def format_program(program: Program) -> str:
    return '\n'.join(f'{i:4}: {inst}' for i, inst in enumerate(program))

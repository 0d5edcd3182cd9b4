''' Optional static checks over a program before it is run '''

import logging as lg
from dataclasses import dataclass
from typing import List

from stackvm.common.instruction import Instruction, Program
from stackvm.common.ops import Opcode, JUMPS


@dataclass(frozen=True)
class Issue:
    index: int
    instruction: Instruction
    message: str

    def __str__(self):
        return f'{self.index}: {self.instruction}: {self.message}'


def check_instruction(index: int, inst: Instruction, length: int) -> List[str]:
    problems = []
    operand = inst.operand.value

    # Jumping to the end of the program is a way to stop, so it is allowed
    if inst.opcode in JUMPS and not (0 <= operand <= length):
        problems.append(f'jump target {operand} outside 0..{length}')

    if inst.opcode == Opcode.DUP and operand < 0:
        problems.append(f'negative dup depth {operand}')

    return problems


def verify(program: Program) -> List[Issue]:
    length = len(program)
    issues = [
        Issue(index, inst, message)
        for index, inst in enumerate(program)
        for message in check_instruction(index, inst, length)
    ]

    for issue in issues:
        lg.debug(f'Verifier: {issue}')

    return issues

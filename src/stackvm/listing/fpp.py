''' First-pass collector for program listings '''

import logging as lg
from dataclasses import dataclass
from typing import Dict, List

from stackvm.common.ops import Opcode


class ListingError(ValueError):
    pass


@dataclass
class Pending:
    opcode: Opcode
    line: int
    operand: int | str | None = None  # str is a label reference


class FPP:
    cmd_list: List[Pending]
    label_dict: Dict[str, int]
    line: int

    def __init__(self):
        self.cmd_list = []
        self.label_dict = dict()
        self.line = 0

    def fail(self, message: str):
        raise ListingError(f'line {self.line}: {message}')

    def issue_label(self, name: str):
        if name in self.label_dict:
            self.fail(f'duplicate label {name}')

        lg.debug(f'New label {name} at {len(self.cmd_list)}')
        self.label_dict[name] = len(self.cmd_list)

    def issue_op(self, opcode: Opcode):
        self.cmd_list.append(Pending(opcode, self.line))

    def issue_const(self, value: int):
        self.cmd_list[-1].operand = value

    def issue_ref(self, name: str):
        self.cmd_list[-1].operand = name

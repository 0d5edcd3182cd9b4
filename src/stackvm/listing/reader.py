from pathlib import Path
import logging as lg
from typing import List

import pyparsing as pp

from stackvm.common.instruction import Instruction
from stackvm.common.word import Word, ZERO
from stackvm.listing.fpp import FPP, Pending, ListingError
import stackvm.listing.grammar as grammar


def first_pass(text: str) -> FPP:
    fpp = FPP()

    for number, line in enumerate(text.splitlines(), start=1):
        fpp.line = number

        try:
            actions = grammar.statement.parse_string(line, parse_all=True)
        except pp.ParseException as e:
            raise ListingError(f'line {number}: cannot parse {line.strip()!r} ({e.msg})')

        for (func, arg) in actions:
            func(fpp, arg)

    return fpp


def resolve(fpp: FPP, pending: Pending) -> Instruction:
    operand = pending.operand

    if isinstance(operand, str):
        if operand not in fpp.label_dict:
            raise ListingError(f'line {pending.line}: undefined label {operand}')

        operand = fpp.label_dict[operand]

    try:
        word = ZERO if operand is None else Word(operand)
    except ValueError as e:
        raise ListingError(f'line {pending.line}: {e}')

    return Instruction(pending.opcode, word)


def read_text(text: str) -> List[Instruction]:
    fpp = first_pass(text)
    program = [resolve(fpp, pending) for pending in fpp.cmd_list]
    lg.debug(f'Listing resolved to {len(program)} instructions')
    return program


def read_file(filepath: str | Path) -> List[Instruction]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Reading file {filepath}')

    try:
        text = filepath.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ListingError(f'cannot read {filepath}: {e}')

    return read_text(text)

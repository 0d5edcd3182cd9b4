# type: ignore
''' Listing grammar, one statement per line '''

import pyparsing as pp

from stackvm.common.ops import Opcode, WITH_OPERAND
from stackvm.listing.fpp import FPP


def g_cmd(op: Opcode):
    return pp.Keyword(op.mnemonic).set_parse_action(lambda _: (FPP.issue_op, op))


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.issue_label, r[0]))

s_dec_const = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: (FPP.issue_const, int(r[0])))
ref = id.copy().set_parse_action(lambda r: (FPP.issue_ref, r[0]))
operand = s_dec_const | ref

cmd = pp.MatchFirst([
    g_cmd(op) + operand if op in WITH_OPERAND else g_cmd(op)
    for op in Opcode
])

statement = pp.Optional(label) + pp.Optional(cmd) + pp.Optional(comment)

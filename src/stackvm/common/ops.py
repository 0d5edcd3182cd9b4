from enum import IntEnum


class Opcode(IntEnum):
    PUSH = 0x01  # V -> [SP++]
    POP = 0x02   # [--SP] -> void
    DUP = 0x03   # [SP - 1 - N] -> [SP++]
    PLUS = 0x04  # A + B
    MINUS = 0x05  # A - B (A is top)
    MULT = 0x06  # A * B
    DIV = 0x07   # A / B (A is top), truncating
    JMP = 0x08   # T -> IP
    JNZ = 0x09   # if [--SP] .ne 0 T -> IP
    JEQ = 0x0A   # if [SP - 1] .eq [SP - 2] T -> IP; drop top
    HLT = 0x0B   # halt

    @property
    def mnemonic(self) -> str:
        return self.name.lower()


# Opcodes whose operand is meaningful
WITH_OPERAND = frozenset({
    Opcode.PUSH,
    Opcode.DUP,
    Opcode.JMP,
    Opcode.JNZ,
    Opcode.JEQ,
})

JUMPS = frozenset({
    Opcode.JMP,
    Opcode.JNZ,
    Opcode.JEQ,
})

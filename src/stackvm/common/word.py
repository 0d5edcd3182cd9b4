import struct
from dataclasses import dataclass

from stackvm.common.hwconf import WORD_MIN, WORD_MAX, WORD_MASK


@dataclass(frozen=True)
class Word:
    """Signed 32-bit machine word."""
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f'Word value must be int, got {self.value!r}')

        if not (WORD_MIN <= self.value <= WORD_MAX):
            raise ValueError(
                f'Word value must be {WORD_MIN}..{WORD_MAX}, got {self.value}'
            )

    @classmethod
    def wrap(cls, value: int) -> 'Word':
        (v,) = struct.unpack('>i', struct.pack('>I', value & WORD_MASK))
        return cls(v)

    def __str__(self):
        return str(self.value)


ZERO = Word(0)


def as_word(value: 'int | Word') -> Word:
    if isinstance(value, Word):
        return value

    return Word(value)

STACK_CAPACITY = 1024   # words

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1

DEFAULT_STEP_BUDGET = 69

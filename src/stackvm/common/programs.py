''' Built-in programs for the command line driver '''

from typing import Dict, Tuple

import stackvm.common.instruction as i


# Pushes 0 1 1 2 3 5 8 ... until the stack or the step budget runs out
FIBONACCI: Tuple[i.Instruction, ...] = (
    i.push(0),  # a
    i.push(1),  # b
    i.dup(1),   # a
    i.dup(1),   # b
    i.plus(),   # a + b
    i.jmp(2),
)

# Counts 5 down to 0, leaving 0 on the stack
COUNTDOWN: Tuple[i.Instruction, ...] = (
    i.push(5),
    i.push(-1),
    i.plus(),
    i.dup(0),
    i.jnz(1),
    i.hlt(),
)

BUILTIN: Dict[str, Tuple[i.Instruction, ...]] = {
    'fibonacci': FIBONACCI,
    'countdown': COUNTDOWN,
}

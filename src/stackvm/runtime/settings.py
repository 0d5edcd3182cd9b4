from stackvm.common.hwconf import DEFAULT_STEP_BUDGET


class RunSettings:
    verbose: bool
    steps: int
    dump: bool
    check: bool
    program: str

    def __init__(self):
        self.verbose = False
        self.steps = DEFAULT_STEP_BUDGET
        self.dump = True
        self.check = False
        self.program = 'fibonacci'

    def update(
        self,
        verbose: bool | None = None,
        steps: int | None = None,
        dump: bool | None = None,
        check: bool | None = None,
        program: str | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if steps is not None:
            self.steps = steps

        if dump is not None:
            self.dump = dump

        if check is not None:
            self.check = check

        if program is not None:
            self.program = program

        return self

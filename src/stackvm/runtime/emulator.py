import sys
from dataclasses import dataclass
from pathlib import Path
import logging as lg
import traceback
from typing import Callable

import click

from stackvm.common.instruction import Program
from stackvm.common.programs import BUILTIN
from stackvm.runtime.machine import Machine
from stackvm.runtime.settings import RunSettings
from stackvm.runtime.traps import Trap
import stackvm.runtime.verifier as verifier
import stackvm.listing.reader as reader


EXIT_HALT = 0
EXIT_TRAP = 2
EXIT_KEYBOARD = 3
EXIT_BAD_PROGRAM = 4
EXIT_EXEC_ERROR = 100


@dataclass(frozen=True)
class RunResult:
    trap: Trap
    steps: int
    halted: bool


def run(
    machine: Machine,
    budget: int,
    on_step: Callable[[Machine], None] | None = None
) -> RunResult:
    trap = Trap.NO_TRAP
    steps = 0

    while not machine.halted and steps < budget:
        trap = machine.execute()
        steps += 1

        if trap != Trap.NO_TRAP:
            break

        if on_step is not None:
            on_step(machine)

    return RunResult(trap, steps, machine.halted)


def load_program(settings: RunSettings, listing: Path | None) -> Program:
    if listing is not None:
        lg.info(f'Reading listing {listing.name}')
        return reader.read_file(listing)

    lg.info(f'Using built-in program {settings.program}')
    return BUILTIN[settings.program]


def execute(settings: RunSettings, program: Program) -> RunResult:
    machine = Machine()
    machine.load(program)

    def echo_dump(m: Machine):
        click.echo(m.dump())
        click.echo()

    on_step = echo_dump if settings.dump else None
    return run(machine, settings.steps, on_step)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option(
    '-p', '--program', type=click.Choice(sorted(BUILTIN)),
    help='Built-in program to run when no listing is given'
)
@click.option('-n', '--steps', type=click.IntRange(min=0), help='Step budget')
@click.option('--dump/--no-dump', default=True, help='Print the stack after each step')
@click.option('--check', is_flag=True, help='Verify the program before running')
@click.argument('listing', type=click.Path(dir_okay=False, path_type=Path), required=False)
def main(ctx: click.Context, listing: Path | None, **params):
    ctx.ensure_object(RunSettings)
    settings: RunSettings = ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
    lg.info('STACKVM')

    try:
        program = load_program(settings, listing)

        if settings.check:
            issues = verifier.verify(program)

            for issue in issues:
                click.echo(f'Error: {issue}', err=True)

            if issues:
                sys.exit(EXIT_BAD_PROGRAM)

        result = execute(settings, program)

    except reader.ListingError as e:
        lg.info(f'Bad listing: {e}')
        click.echo(f'Error: {e}', err=True)
        sys.exit(EXIT_BAD_PROGRAM)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)

    if result.trap != Trap.NO_TRAP:
        click.echo(result.trap.message)
        lg.info(f'Execution stopped by trap after {result.steps} steps')
        sys.exit(EXIT_TRAP)

    if result.halted:
        lg.info('Execution halted gracefully')
    else:
        lg.info(f'Step budget of {settings.steps} exhausted')

    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    main()

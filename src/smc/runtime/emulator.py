import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable, Tuple

import click

import smc.sasm.asm as asm
from smc.common.command import Program
from smc.common.errors import AssemblyError
from smc.common.hwconf import CHANNEL_COUNT, REGISTER_COUNT
from smc.runtime.channels import console_input, console_output
import smc.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_ASSEMBLY_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def load_program(filename: Path, source: bool) -> Program:
    if source:
        binary = asm.compile_string(filename.read_text())
    else:
        binary = filename.read_bytes()

    return asm.bytes_to_program(binary)


def wire_console(proc: cpu.CPU, inputs: Iterable[int], outputs: Iterable[int]):
    for channel in inputs:
        proc.input_channels[channel] = console_input(channel)

    for channel in outputs:
        proc.output_channels[channel] = console_output(channel)


def dump_registers(proc: cpu.CPU, registers: Iterable[int]):
    for r in registers:
        click.echo(f'R{r} = {proc.registers[r]}')


def execute(proc: cpu.CPU, trace: bool = False):
    if not trace:
        proc.run_to_halt()
        return

    while not proc.halted:
        proc.step()
        proc.debug_dump()


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-s', '--source', is_flag=True, help='Assemble the program text before running')
@click.option('-i', '--input', 'inputs', type=click.IntRange(0, CHANNEL_COUNT - 1), multiple=True, default=(0,),
              help='Input channel read from the console')
@click.option('-o', '--output', 'outputs', type=click.IntRange(0, CHANNEL_COUNT - 1), multiple=True, default=(0,),
              help='Output channel printed to the console')
@click.option('-r', '--register', 'registers', type=click.IntRange(0, REGISTER_COUNT - 1), multiple=True,
              help='Register printed on halt')
@click.option('--trace', is_flag=True, help='Dump processor state after every step')
@click.argument('program_filename', type=Path)
def run(
    verbose: bool,
    source: bool,
    inputs: Tuple[int],
    outputs: Tuple[int],
    registers: Tuple[int],
    trace: bool,
    program_filename: Path
):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('SMC')

    try:
        proc = cpu.CPU(load_program(program_filename, source))
        wire_console(proc, inputs, outputs)
        proc.on_halted = lambda: dump_registers(proc, registers)
        execute(proc, trace)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except AssemblyError as e:
        lg.error(f'Assembly failed: {e}')
        sys.exit(EXIT_ASSEMBLY_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()

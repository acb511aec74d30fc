''' Console-backed channels for the demonstration driver '''

import click

from smc.common.hwconf import INT16_MIN, INT16_MAX
from smc.runtime.cpu import InputChannel, OutputChannel


def console_input(channel: int) -> InputChannel:
    def read() -> int:
        return click.prompt(f'in[{channel}]', type=click.IntRange(INT16_MIN, INT16_MAX))

    return read


def console_output(channel: int) -> OutputChannel:
    def write(value: int):
        click.echo(value)

    return write

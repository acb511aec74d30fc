import sys
from pathlib import Path
import logging as lg

import click

from smc.sasm.asm import compile_string
from smc.common.errors import AssemblyError


def compile_file(source: Path, binary: Path):
    lg.debug(f'Compiling file {source}')
    bytestr = compile_string(source.read_text())
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=Path)
@click.argument('binary', type=Path, required=False)
def compile(verbose: bool, source: Path, binary: Path | None):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SMC ASM')

    if not binary:
        binary = source.with_suffix('.bin')

    try:
        compile_file(source, binary)
    except AssemblyError as e:
        lg.error(f'{source.name}: {e}')
        sys.exit(1)

    lg.info(f'Written {binary.name}')


if __name__ == '__main__':
    compile()

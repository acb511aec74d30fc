# type: ignore
import pytest

import smc.runtime.cpu as cpu


@pytest.fixture
def proc():
    yield cpu.CPU()


@pytest.fixture
def outputs():
    yield []


@pytest.fixture
def wired(proc, outputs):
    ''' Processor with output channel 0 collecting into `outputs` '''
    proc.output_channels[0] = outputs.append
    yield proc

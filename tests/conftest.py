"""
.. module:: tests.conftest
   :platform: cpython
   :synopsis: Fixtures for testing.

.. moduleauthor:: Alexander Sowitzki <dev@eqrx.net>
"""

from unittest.mock import Mock
import pytest
from servokit.hardware.pca9685 import DriverState


class RecordingBus:
    """ Bus mockup that records every write.

    :param fail_at: Number of the write (starting at 1) that shall fail.
    :type fail_at: int
    """

    def __init__(self, fail_at=None):
        self.writes = []
        self.fail_at = fail_at
        self.closed = False

    def write(self, address, data):
        """ Mimic :func:`servokit.platform.linux.i2c.Bus.write`. """

        assert not self.closed
        if self.fail_at is not None and len(self.writes) + 1 == self.fail_at:
            raise OSError(121, "Remote I/O error")
        self.writes.append((address, bytes(data)))

    def fail_after(self, count):
        """ Let the write after the next count writes fail. """

        self.fail_at = len(self.writes) + count + 1

    def close(self):
        """ Mimic :func:`servokit.platform.linux.i2c.Bus.close`. """

        self.closed = True


@pytest.fixture(scope="function")
def bus():
    """ Create a recording bus. """

    yield RecordingBus()


@pytest.fixture(scope="function")
def wait():
    """ Create a delay function that does not block. """

    yield Mock()


@pytest.fixture(scope="function")
def state(bus):
    """ Create a fresh state on the recording bus. """

    yield DriverState(bus, 0x40, 25000000)


@pytest.fixture(scope="function")
def awake(state, wait):
    """ Create a state that has been set to 50 Hz. """

    from servokit.hardware.pca9685 import set_pwm_frequency

    s = set_pwm_frequency(state, 50, wait=wait)
    state.bus.writes.clear()
    wait.reset_mock()
    yield s

""" In memory mirror of the chip configuration. """

import collections
from .registers import CHANNELS

__author__ = "Alexander Sowitzki"

_FIELDS = ("bus", "address", "reference_clock_speed",
           "mode1", "mode2", "prescale", "duty_cycles")


class DriverState(collections.namedtuple("DriverState", _FIELDS)):
    """ Configuration of one PCA9685 as last written by this driver.

    Instances are immutable, operations return updated copies.

    :param bus: Open transport handle. Owned by this state.
    :type bus: object
    :param address: 7 bit bus address of the chip.
    :type address: int
    :param reference_clock_speed: Oscillator speed in hertz.
    :type reference_clock_speed: int
    :param mode1: Mirror of the MODE1 register.
    :type mode1: int
    :param mode2: Mirror of the MODE2 register. Not written yet.
    :type mode2: int
    :param prescale: Programmed prescale or -1 if unset.
    :type prescale: int
    :param duty_cycles: Last written duty cycle per channel or None.
    :type duty_cycles: tuple
    """

    __slots__ = ()

    def __new__(cls, bus, address, reference_clock_speed, mode1=0x11,
                mode2=0x04, prescale=-1, duty_cycles=(None,) * CHANNELS):
        return super().__new__(cls, bus, address, reference_clock_speed,
                               mode1, mode2, prescale, tuple(duty_cycles))

    def __repr__(self):
        return ("DriverState(address=0x{:02x}, mode1=0x{:02x}, "
                "mode2=0x{:02x}, prescale={}, duty_cycles={})").format(
                    self.address, self.mode1, self.mode2, self.prescale,
                    self.duty_cycles)

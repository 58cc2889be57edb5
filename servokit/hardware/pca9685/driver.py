""" Register write sequences for PCA9685 PWM devices.

Every operation takes a :class:`DriverState` and returns an updated copy.
A failing write raises :class:`servokit.TransportError` and aborts the
rest of the sequence. The state passed in is never modified, so a caller
still holds the state from before the failed call but should treat it as
stale and initialize again.
"""

import logging
import numbers
import time

from servokit.hardware.driver import DriverError, guard, require
from servokit.platform.linux.i2c import open_bus
from . import registers as reg
from .bits import assign_bits
from .state import DriverState
from .timing import (PRESCALE_MIN, PRESCALE_MAX, prescale_from_frequency,
                     pulse_range_from_duty_cycle, split_ticks)

__author__ = "Alexander Sowitzki"

ALL = "all"
""" Channel selector for all channels at once. """

OSCILLATOR_DELAY = 0.005
""" Seconds the oscillator needs after sleep mode changes. """

DEFAULTS = {"i2c_bus": "i2c-1",
            "pca9685_address": 0x40,
            "reference_clock_speed": 25000000,
            "frequency": 50}
""" Default initialization configuration. """


def _logger(state):
    return logging.getLogger("<PCA9685@0x{:02x}>".format(state.address))


@guard(OSError)
def _open(opener, identifier):
    return opener(identifier)


@guard(OSError)
def _bus_write(bus, address, data):
    bus.write(address, data)


def _delay(wait):
    # Block until the oscillator settled.

    (wait or time.sleep)(OSCILLATOR_DELAY)


def _write(state, register, data):
    # Write one register of the device.

    _bus_write(state.bus, state.address, bytes((register, data)))
    _logger(state).debug("Wrote 0x%02x to register 0x%02x at address 0x%02x",
                         data, register, state.address)
    return state


def _write_pulse_range(state, block, on, off):
    on_l, on_h = split_ticks(on)
    off_l, off_h = split_ticks(off)
    for register, data in zip(block, (on_l, on_h, off_l, off_h)):
        _write(state, register, data)
    return state


def _check_frequency(freq_hz):
    require(isinstance(freq_hz, int) and not isinstance(freq_hz, bool)
            and freq_hz > 0,
            "Frequency must be a positive integer, got {!r}", freq_hz)


def _check_percent(percent):
    require(isinstance(percent, numbers.Real)
            and not isinstance(percent, bool)
            and 0.0 <= percent <= 100.0,
            "Duty cycle must be between 0 and 100 percent, got {!r}", percent)


def _check_channel(channel):
    require(channel == ALL or (isinstance(channel, int)
                               and not isinstance(channel, bool)
                               and 0 <= channel < reg.CHANNELS),
            "Channel must be between 0 and 15 or {!r}, got {!r}",
            ALL, channel)


def initialize(config=None, opener=open_bus, wait=None):
    """ Open the bus and program the initial frequency.

    :param config: Mapping with any of the keys of :data:`DEFAULTS`.
    :type config: dict
    :param opener: Callable that opens a bus by its identifier.
    :type opener: callable
    :param wait: Blocking delay function, receives seconds.
        Defaults to :func:`time.sleep`.
    :type wait: callable
    :returns: State of the initialized device.
    :rtype: DriverState
    :raises InvalidArgument: If the configuration is invalid.
    :raises TransportError: If the bus could not be opened or written.
    """

    config = dict(config or {})
    unknown = sorted(set(config) - set(DEFAULTS))
    require(not unknown, "Unknown configuration keys: {}", ", ".join(unknown))
    cfg = dict(DEFAULTS, **config)

    address = cfg["pca9685_address"]
    clock = cfg["reference_clock_speed"]
    require(isinstance(address, int) and not isinstance(address, bool)
            and 0 <= address <= 0x7F,
            "Address must be between 0x00 and 0x7f, got {!r}", address)
    require(isinstance(clock, int) and not isinstance(clock, bool)
            and clock > 0,
            "Reference clock speed must be positive, got {!r}", clock)
    _check_frequency(cfg["frequency"])

    bus = _open(opener, cfg["i2c_bus"])
    state = DriverState(bus, address, clock)
    _logger(state).info("Opened %s", cfg["i2c_bus"])
    try:
        return set_pwm_frequency(state, cfg["frequency"], wait=wait)
    except DriverError:
        bus.close()
        raise


def reset(state):
    """ Perform a software reset of all devices on the bus.

    See datasheet 7.1.4 and 7.6. The state is returned unchanged.

    :param state: Current state.
    :type state: DriverState
    :returns: The same state.
    :rtype: DriverState
    """

    _bus_write(state.bus, reg.GENERAL_CALL_ADDRESS,
               bytes((reg.SOFTWARE_RESET,)))
    _logger(state).debug("Sent software reset")
    return state


def sleep(state, wait=None):
    """ Put the device into sleep mode. """

    state = update_mode1(state, ((reg.MODE1_SLEEP, True),))
    _delay(wait)
    return state


def wake_up(state):
    """ Wake the device from sleep mode. """

    return update_mode1(state, ((reg.MODE1_SLEEP, False),))


def set_pwm_frequency(state, freq_hz, wait=None):
    """ Set the PWM frequency.

    The prescale may only be changed while the oscillator is off, so the
    device is put to sleep first and restarted afterwards with auto
    increment enabled.

    :param state: Current state.
    :type state: DriverState
    :param freq_hz: Frequency in hertz.
    :type freq_hz: int
    :param wait: Blocking delay function, receives seconds.
        Defaults to :func:`time.sleep`.
    :type wait: callable
    :returns: Updated state.
    :rtype: DriverState
    :raises InvalidArgument: If the frequency is not a positive integer.
    """

    _check_frequency(freq_hz)
    prescale = prescale_from_frequency(freq_hz, state.reference_clock_speed)
    _logger(state).debug("Set frequency to %sHz (prescale: %s)",
                         freq_hz, prescale)

    # Go to sleep, turn off internal oscillator.
    state = update_mode1(state, ((reg.MODE1_RESTART, False),
                                 (reg.MODE1_SLEEP, True)))
    state = update_prescale(state, prescale)
    _delay(wait)
    return update_mode1(state, ((reg.MODE1_RESTART, True),
                                (reg.MODE1_SLEEP, False),
                                (reg.MODE1_AUTO_INCREMENT, True)))


def set_pwm_duty_cycle(state, channel, percent):
    """ Set the duty cycle of one channel or of all channels.

    The in memory record is only updated after all writes succeeded.

    :param state: Current state.
    :type state: DriverState
    :param channel: Channel between 0 and 15 or :data:`ALL`.
    :type channel: object
    :param percent: Duty cycle between 0.0 and 100.0.
    :type percent: float
    :returns: Updated state.
    :rtype: DriverState
    :raises InvalidArgument: If channel or percent are out of range.
    """

    _check_channel(channel)
    _check_percent(percent)
    on, off = pulse_range_from_duty_cycle(percent)
    _logger(state).debug("Set duty cycle to %s%% (%s, %s) for channel %s",
                         percent, on, off, channel)

    if channel == ALL:
        _write_pulse_range(state, reg.ALL_BLOCK, on, off)
        duty_cycles = (percent,) * reg.CHANNELS
    else:
        _write_pulse_range(state, reg.channel_block(channel), on, off)
        duty_cycles = list(state.duty_cycles)
        duty_cycles[channel] = percent
    return state._replace(duty_cycles=tuple(duty_cycles))


def update_mode1(state, flags):
    """ Apply (flag, enabled) pairs to MODE1 and write it once.

    :param state: Current state.
    :type state: DriverState
    :param flags: Iterable of bit masks and whether to set them.
    :type flags: iterable
    :returns: Updated state.
    :rtype: DriverState
    """

    state = state._replace(mode1=assign_bits(state.mode1, flags))
    return _write(state, reg.MODE1, state.mode1)


def update_prescale(state, prescale):
    """ Write the prescale register.

    Only valid while the device sleeps, see :func:`set_pwm_frequency`.
    """

    require(isinstance(prescale, int)
            and PRESCALE_MIN <= prescale <= PRESCALE_MAX,
            "Prescale must be between {} and {}, got {!r}",
            PRESCALE_MIN, PRESCALE_MAX, prescale)
    state = state._replace(prescale=prescale)
    return _write(state, reg.PRESCALE, prescale)

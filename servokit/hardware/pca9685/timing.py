""" Conversion between PWM parameters and register values. """

import math

__author__ = "Alexander Sowitzki"

TICKS = 4096
""" Steps within one PWM period. """
FULL = 0x1000
""" Bit that forces a channel fully on or fully off. """
PRESCALE_MIN = 3
PRESCALE_MAX = 255


def _round(value):
    # Half away from zero, as in the datasheet formula.

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def prescale_from_frequency(freq_hz, reference_clock_speed):
    """ Calculate the prescale register value for a PWM frequency.

    The frequency must be positive, validation is up to the caller.

    :param freq_hz: Wanted frequency in hertz.
    :type freq_hz: int
    :param reference_clock_speed: Oscillator speed in hertz.
    :type reference_clock_speed: int
    :returns: Prescale between 3 and 255.
    :rtype: int
    """

    prescale = _round(reference_clock_speed / (TICKS * freq_hz)) - 1
    return max(PRESCALE_MIN, min(PRESCALE_MAX, prescale))


def pulse_range_from_duty_cycle(percent):
    """ Calculate on and off ticks for a duty cycle.

    0 and 100 percent use the full off and full on bits to avoid a
    single tick glitch. Other values rise at tick 0.

    :param percent: Duty cycle between 0.0 and 100.0.
    :type percent: float
    :returns: Tuple of on tick and off tick.
    :rtype: tuple
    """

    if percent <= 0.0:
        return 0, FULL
    if percent >= 100.0:
        return FULL, 0
    return 0, _round(percent / 100.0 * (TICKS - 1))


def split_ticks(ticks):
    """ Split a tick value into its low and high register bytes. """

    return ticks & 0xFF, (ticks >> 8) & 0x1F

""" Test timing module. """

import unittest

from .timing import (FULL, prescale_from_frequency,
                     pulse_range_from_duty_cycle, split_ticks)

__author__ = "Alexander Sowitzki"

CLOCK = 25000000

class PrescaleTest(unittest.TestCase):
    """ Test prescale calculation. """

    def test_datasheet(self):
        """ Test the datasheet operating point. """

        self.assertEqual(121, prescale_from_frequency(50, CLOCK))
        self.assertEqual(30, prescale_from_frequency(200, CLOCK))

    def test_clamp(self):
        """ Test that results stay within the register limits. """

        self.assertEqual(3, prescale_from_frequency(1526, CLOCK))
        self.assertEqual(3, prescale_from_frequency(100000, CLOCK))
        self.assertEqual(255, prescale_from_frequency(1, CLOCK))
        for freq in range(1, 5000, 7):
            prescale = prescale_from_frequency(freq, CLOCK)
            self.assertGreaterEqual(prescale, 3)
            self.assertLessEqual(prescale, 255)

    def test_round_half_up(self):
        """ Test that halves round away from zero. """

        self.assertEqual(3, prescale_from_frequency(1, 4096 * 4))
        self.assertEqual(4, prescale_from_frequency(1, 4096 * 4 + 2048))


class PulseRangeTest(unittest.TestCase):
    """ Test duty cycle conversion. """

    def test_sentinels(self):
        """ Test full off and full on. """

        self.assertEqual((0, FULL), pulse_range_from_duty_cycle(0.0))
        self.assertEqual((FULL, 0), pulse_range_from_duty_cycle(100.0))
        self.assertEqual((0, FULL), pulse_range_from_duty_cycle(0))
        self.assertEqual((FULL, 0), pulse_range_from_duty_cycle(100))

    def test_ticks(self):
        """ Test regular values. """

        self.assertEqual((0, 2048), pulse_range_from_duty_cycle(50.0))
        self.assertEqual((0, 1024), pulse_range_from_duty_cycle(25.0))
        self.assertEqual((0, 4095), pulse_range_from_duty_cycle(99.99))
        self.assertEqual((0, 0), pulse_range_from_duty_cycle(0.01))

    def test_split(self):
        """ Test splitting ticks into register bytes. """

        self.assertEqual((0x00, 0x10), split_ticks(FULL))
        self.assertEqual((0xFF, 0x0F), split_ticks(4095))
        self.assertEqual((0x00, 0x08), split_ticks(2048))
        self.assertEqual((0, 0), split_ticks(0))

""" Test bits module. """

import unittest

from .bits import assign_bit, assign_bits
from .registers import (MODE1_AUTO_INCREMENT, MODE1_RESTART, MODE1_SLEEP,
                        channel_block)

__author__ = "Alexander Sowitzki"

class BitsTest(unittest.TestCase):
    """ Test bit assignment. """

    def test_assign_bit(self):
        """ Test setting and clearing single bits. """

        self.assertEqual(0x11, assign_bit(0x01, MODE1_SLEEP, True))
        self.assertEqual(0x11, assign_bit(0x11, MODE1_SLEEP, True))
        self.assertEqual(0x01, assign_bit(0x11, MODE1_SLEEP, False))
        self.assertEqual(0x01, assign_bit(0x01, MODE1_SLEEP, False))
        self.assertEqual(0x00, assign_bit(0xFF, 0xFF, False))

    def test_assign_bits(self):
        """ Test that pairs are applied from left to right. """

        flags = ((MODE1_RESTART, True), (MODE1_SLEEP, False),
                 (MODE1_AUTO_INCREMENT, True))
        self.assertEqual(0xA1, assign_bits(0x11, flags))
        self.assertEqual(0x00, assign_bits(0x10, ((MODE1_SLEEP, True),
                                                  (MODE1_SLEEP, False))))
        self.assertEqual(0x11, assign_bits(0x11, ()))

    def test_channel_block(self):
        """ Test channel register addressing. """

        self.assertEqual((0x06, 0x07, 0x08, 0x09), channel_block(0))
        self.assertEqual((0x12, 0x13, 0x14, 0x15), channel_block(3))
        self.assertEqual((0x42, 0x43, 0x44, 0x45), channel_block(15))

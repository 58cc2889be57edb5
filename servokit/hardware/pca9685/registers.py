""" Register map and bit masks of the PCA9685. """

__author__ = "Alexander Sowitzki"

GENERAL_CALL_ADDRESS = 0x00
""" Bus address every device responds to. """
SOFTWARE_RESET = 0x06
""" Payload that resets all devices when sent to the general call address. """

MODE1 = 0x00
MODE2 = 0x01
LED0_ON_L = 0x06
LED0_ON_H = 0x07
LED0_OFF_L = 0x08
LED0_OFF_H = 0x09
ALL_LED_ON_L = 0xFA
ALL_LED_ON_H = 0xFB
ALL_LED_OFF_L = 0xFC
ALL_LED_OFF_H = 0xFD
PRESCALE = 0xFE

CHANNEL_STRIDE = 4
""" Each channel occupies four consecutive registers. """
CHANNELS = 16

# MODE1 bits
MODE1_ALLCALL = 0x01
MODE1_SUB3 = 0x02
MODE1_SUB2 = 0x04
MODE1_SUB1 = 0x08
MODE1_SLEEP = 0x10
MODE1_AUTO_INCREMENT = 0x20
MODE1_EXTCLK = 0x40
MODE1_RESTART = 0x80

# MODE2 bits
MODE2_OUTNE1 = 0x01
MODE2_OUTNE2 = 0x02
MODE2_OUTDRV = 0x04
MODE2_OCH = 0x08
MODE2_INVRT = 0x10


def channel_block(channel):
    """ Return the ON_L, ON_H, OFF_L and OFF_H registers of a channel.

    :param channel: Channel number between 0 and 15.
    :type channel: int
    :returns: Tuple of four register addresses.
    :rtype: tuple
    """

    offset = CHANNEL_STRIDE * channel
    return (LED0_ON_L + offset, LED0_ON_H + offset,
            LED0_OFF_L + offset, LED0_OFF_H + offset)


ALL_BLOCK = (ALL_LED_ON_L, ALL_LED_ON_H, ALL_LED_OFF_L, ALL_LED_OFF_H)
""" Broadcast registers that address every channel at once. """

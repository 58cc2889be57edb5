""" Bit manipulation for mode registers. """

__author__ = "Alexander Sowitzki"


def assign_bit(value, flag, enabled):
    """ Set or clear the bits of flag in value.

    :param value: Register value.
    :type value: int
    :param flag: Mask of the bits to change.
    :type flag: int
    :param enabled: Set the bits if True, clear them otherwise.
    :type enabled: bool
    :returns: New register value.
    :rtype: int
    """

    if enabled:
        return (value | flag) & 0xFF
    return value & ~flag & 0xFF


def assign_bits(value, flags):
    """ Apply multiple (flag, enabled) pairs from left to right. """

    for flag, enabled in flags:
        value = assign_bit(value, flag, enabled)
    return value

""" C interface types for I2C access. """

import ctypes

__author__ = "Alexander Sowitzki"

I2C_RDWR = 0x0707
""" ioctl request that performs combined transactions. """


class Message(ctypes.Structure):
    """ Represent the struct i2c_msg from linux/i2c-dev.h. """

    _fields_ = [('addr', ctypes.c_uint16),
                ('flags', ctypes.c_uint16),
                ('len', ctypes.c_uint16),
                ('buf', ctypes.POINTER(ctypes.c_uint8))]


class IoctlData(ctypes.Structure):
    """ Represent the struct i2c_rdwr_ioctl_data from linux/i2c-dev.h. """

    _fields_ = [('msgs', ctypes.POINTER(Message)),
                ('nmsgs', ctypes.c_uint32)]


def write_transaction(address, data):
    """ Build an I2C_RDWR argument holding a single write message.

    :param address: 7 bit address of the target.
    :type address: int
    :param data: Payload.
    :type data: bytes
    :returns: Argument for :func:`fcntl.ioctl`.
    :rtype: IoctlData
    """

    buf = (ctypes.c_uint8 * len(data)).from_buffer_copy(data)
    msgs = (Message * 1)(Message(addr=address, flags=0,
                                 len=len(data), buf=buf))
    return IoctlData(msgs=msgs, nmsgs=1)

""" Provide I2C functionality for linux. """

import fcntl
import io
import os
from . import _types

__author__ = "Alexander Sowitzki"


class Bus:
    """ Handle of an opened I2C bus.

    Each write carries the address of its target device, so one handle
    reaches every device on the bus including the general call address.

    :param path: Path to the device file.
    :type path: str
    """

    def __init__(self, path):
        self.path = path
        self.fd = None

    def write(self, address, data):
        """ Write data to a device in a single transaction.

        :param address: 7 bit address of the device.
        :type address: int
        :param data: One or two bytes to write.
        :type data: bytes
        :raises ValueError: If address or data length are invalid.
        :raises OSError: If the transaction failed.
        """

        if not isinstance(data, (bytes, bytearray)):
            data = bytes(data)
        if not 0 <= address <= 0x7F:
            raise ValueError("Invalid address: {}".format(address))
        if not 1 <= len(data) <= 2:
            raise ValueError("Invalid payload length: {}".format(len(data)))

        fcntl.ioctl(self.fd, _types.I2C_RDWR,
                    _types.write_transaction(address, data))

    def close(self):
        """ Close the bus file. """

        if self.fd is not None:
            self.fd.close()
            self.fd = None

    def __enter__(self):
        # Open the bus file.

        self.fd = io.open(self.path, "r+b", buffering=0)
        try:
            flags = fcntl.fcntl(self.fd, fcntl.F_GETFL)
            fcntl.fcntl(self.fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
        except OSError:
            self.close()
            raise
        return self

    def __exit__(self, *exc_details):
        self.close()


def bus_path(identifier):
    """ Resolve a bus identifier like "i2c-1" to its device file. """

    if os.path.isabs(identifier):
        return identifier
    return os.path.join("/dev", identifier)


def open_bus(identifier):
    """ Open an I2C bus.

    :param identifier: Bus name below /dev or absolute path.
    :type identifier: str
    :returns: The opened bus handle.
    :rtype: Bus
    :raises OSError: If the bus could not be opened.
    """

    return Bus(bus_path(identifier)).__enter__()

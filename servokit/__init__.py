""" Register level driver for PCA9685 PWM controllers. """

# pylint: disable=unused-import
from .hardware.driver import DriverError, TransportError, InvalidArgument

__author__ = "Alexander Sowitzki"

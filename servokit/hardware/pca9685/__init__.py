""" PCA9685 16 channel PWM controller. """

# pylint: disable=unused-import
from .state import DriverState
from .driver import (ALL, DEFAULTS, initialize, reset, sleep, wake_up,
                     set_pwm_frequency, set_pwm_duty_cycle, update_mode1,
                     update_prescale)

__author__ = "Alexander Sowitzki"

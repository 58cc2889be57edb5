""" Errors and error handling for drivers. """

import functools
import logging

__author__ = "Alexander Sowitzki"


class DriverError(Exception):
    """ Exception representing an recoverable driver error. """


class TransportError(DriverError):
    """ Opening the bus or writing to it failed. """


class InvalidArgument(DriverError, ValueError):
    """ An argument is outside of its documented domain.

    Raised before any bus traffic happens.
    """


def guard(exceptions, log=None):
    """ Create decorator that turns transport faults into driver errors.

    :param exceptions: Exceptions that indicate a transport fault.
    :type exceptions: tuple
    :param log: Logger for the fault. Defaults to the driver logger.
    :type log: logging.Logger
    :returns: Created decorator
    :rtype: callable
    """

    if log is None:
        log = logging.getLogger("<PCA9685>")

    def guard_decorator(func):
        """ Decorator to handle raised exceptions for drivers.

        :param func: Function to guard.
        :type func: callable
        :returns: Function wrapper.
        :rtype: callable
        """

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            """ Wrap function and convert raised exceptions. """

            try:
                return func(*args, **kwargs)
            except exceptions as err:
                log.error(str(err))
                raise TransportError(err) from err

        return wrapper
    return guard_decorator


def require(condition, message, *args):
    """ Raise :class:`InvalidArgument` if condition does not hold.

    :param condition: Condition that must be true.
    :type condition: bool
    :param message: Format string of the error message.
    :type message: str
    :param args: Arguments for the format string.
    :raises InvalidArgument: If condition is false.
    """

    if not condition:
        raise InvalidArgument(message.format(*args))

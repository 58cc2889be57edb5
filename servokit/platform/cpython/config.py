""" Configuration helper. """

import argparse
import logging
import os.path
import yaml
from servokit.hardware.driver import InvalidArgument
from servokit.hardware.pca9685 import DEFAULTS

__author__ = "Alexander Sowitzki"

SECTION = "pca9685"
""" Entry of the configuration file that holds the driver settings. """

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _int(value):
    # Accept 0x prefixed addresses.

    return int(value, 0)


class Config:
    """ Load and parse configuration for the driver.

    Values given on the command line override the configuration file,
    which overrides :data:`servokit.hardware.pca9685.DEFAULTS`.

    :param parser: Argparse instance to use. If None, a new one will be used.
    :type parser: argparse.ArgumentParser
    """

    def __init__(self, parser=None):
        self.parser = parser
        if parser is None:
            self.parser = argparse.ArgumentParser()
        arg = self.parser.add_argument
        arg("--config", help="Path of the configuration file")
        arg("--log-level", default="info", type=str.lower,
            choices=LOG_LEVELS, help="Log level")
        arg("--i2c-bus", dest="i2c_bus", help="I2C bus, e.g. i2c-1")
        arg("--address", dest="pca9685_address", type=_int,
            help="Address of the chip")
        arg("--reference-clock-speed", dest="reference_clock_speed",
            type=int, help="Oscillator speed in hertz")
        arg("--frequency", type=int, help="PWM frequency in hertz")
        self.args = None
        self._config = {}

        self._log = logging.getLogger("<Config>")

    @staticmethod
    def candidates(path=None):
        """ List configuration files to try, most important first. """

        if path is not None:
            return [path]
        home = os.path.expanduser("~")
        return [".servokit.conf",
                os.path.join(home, ".config", "servokit.conf"),
                "/etc/servokit.conf"]

    def read_config(self, path=None):
        """ Find and read yaml configuration.

        :param path: Explicit file to read instead of the search path.
        :type path: str
        :returns: Driver section of the first usable file.
        :rtype: dict
        :raises InvalidArgument: If the driver section is not a mapping.
        """

        for candidate in self.candidates(path):
            try:
                with open(candidate, "r") as f:
                    data = yaml.safe_load(f)
            except IOError:
                self._log.debug("Config file %s could not be opened",
                                candidate)
                continue

            if not isinstance(data, dict) or SECTION not in data:
                self._log.debug("Config file %s does not"
                                " contain entry for %s", candidate, SECTION)
                continue

            section = data[SECTION] or {}
            if not isinstance(section, dict):
                raise InvalidArgument(
                    "Entry {} of {} must be a mapping, got {!r}".format(
                        SECTION, candidate, section))
            self._config = dict(section)
            self._log.debug("Using config file %s", candidate)
            break
        else:
            self._log.debug("No config file found for %s", SECTION)
            self._config = {}

        return self._config

    def parse(self, argv=None):
        """ Parse arguments and configuration.

        :param argv: Arguments to parse instead of sys.argv.
        :type argv: list
        :returns: Parsed arguments.
        :rtype: argparse.Namespace
        """

        self.args = self.parser.parse_args(argv)
        self.read_config(self.args.config)
        return self.args

    def driver_config(self):
        """ Merge defaults, configuration file and arguments.

        :returns: Configuration for :func:`servokit.hardware.pca9685.initialize`.
        :rtype: dict
        """

        cfg = dict(DEFAULTS)
        cfg.update(self._config)
        for key in DEFAULTS:
            value = getattr(self.args, key, None)
            if value is not None:
                cfg[key] = value
        return cfg

    @property
    def log_level(self):
        """ Numeric log level requested on the command line. """

        return logging.getLevelName(self.args.log_level.upper())

""" Command line access to a PCA9685. """

import logging
import sys
from argparse import ArgumentParser
from servokit.hardware.driver import DriverError
from servokit.hardware import pca9685
from servokit.platform.cpython.config import Config

__author__ = "Alexander Sowitzki"


def _channel(value):
    if value == pca9685.ALL:
        return value
    return int(value)


def _setup_arguments(parser):
    """ Define the commands.

    Args:
        parser (argparse.ArgumentParser): Parser to use
    """

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init", help="Initialize only")
    commands.add_parser("reset", help="Software reset of all devices")
    commands.add_parser("sleep", help="Put device into sleep mode")
    commands.add_parser("wake", help="Wake device from sleep mode")
    cmd = commands.add_parser("frequency", help="Set PWM frequency")
    cmd.add_argument("hz", type=int)
    cmd = commands.add_parser("duty", help="Set duty cycle")
    cmd.add_argument("channel", type=_channel, help="0-15 or all")
    cmd.add_argument("percent", type=float)


def execute(state, args):
    """ Run the requested command on an initialized device.

    Args:
        state (DriverState): Current state.
        args (argparse.Namespace): Parsed arguments.
    Returns:
        DriverState: The updated state.
    """

    if args.command == "reset":
        return pca9685.reset(state)
    if args.command == "sleep":
        return pca9685.sleep(state)
    if args.command == "wake":
        return pca9685.wake_up(state)
    if args.command == "frequency":
        return pca9685.set_pwm_frequency(state, args.hz)
    if args.command == "duty":
        return pca9685.set_pwm_duty_cycle(state, args.channel, args.percent)
    return state


def main(argv=None, opener=None):
    """ Program entry method.

    Sets up logging, initializes the device and runs one command.

    Args:
        argv (list): Arguments instead of sys.argv.
        opener (callable): Bus opener instead of the linux one.
    Returns:
        int: Exit status.
    """

    parser = ArgumentParser(description="Control a PCA9685")
    config = Config(parser)
    _setup_arguments(parser)
    try:
        args = config.parse(argv)
    except DriverError as err:
        parser.error(str(err))

    logging.basicConfig(level=config.log_level,
                        format="{levelname} {asctime} {name}: {message}",
                        style="{")
    log = logging.getLogger("<Shell>")

    kwargs = {} if opener is None else {"opener": opener}
    state = None
    try:
        state = pca9685.initialize(config.driver_config(), **kwargs)
        state = execute(state, args)
        log.info("%s", state)
    except DriverError as err:
        log.error("%s failed: %s", args.command, err)
        return 1
    finally:
        if state is not None:
            state.bus.close()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

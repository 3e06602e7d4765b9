#!/usr/bin/env python3
import logging
import sys

from box_stop import config as config_
from box_stop import runtime, utils
from box_stop.commands import stop, version


def run(argv):
    utils.check_privileges()

    result = config_.parse_args(argv, config_.get_defaults())

    if result.action == config_.ACTION_HELP:
        print(config_.get_usage(), end="")
        return 0
    elif result.action == config_.ACTION_VERSION:
        return version.run(result.config)

    config = result.config
    if config.verbose:
        utils.logger.setLevel(logging.DEBUG)
    utils.logger.debug("Config: {}".format(config._asdict()))

    backend = runtime.resolve_runtime(config, config_.get_manager())
    return stop.run(config, backend)


def main(argv=None):
    try:
        return run(sys.argv[1:] if argv is None else argv)
    except utils.BoxStopError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())

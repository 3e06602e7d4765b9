import argparse
import collections
import os

from box_stop import runtime, utils

Config = collections.namedtuple("Config", ["container_name", "non_interactive", "verbose"])

ParseResult = collections.namedtuple("ParseResult", ["action", "config"])

ENV_CONTAINER_NAME = "BOX_CONTAINER_NAME"
ENV_NON_INTERACTIVE = "BOX_NON_INTERACTIVE"
ENV_VERBOSE = "BOX_VERBOSE"
ENV_CONTAINER_MANAGER = "BOX_CONTAINER_MANAGER"

TRUE_VALUES = ["1", "true", "yes", "on"]

HELP_FLAGS = ["-h", "--help"]
VERSION_FLAGS = ["-V", "--version"]
VERBOSE_FLAGS = ["-v", "--verbose"]
YES_FLAGS = ["-Y", "--yes"]
NAME_FLAGS = ["-n", "--name"]
END_OF_OPTIONS = "--"

ACTION_HELP = "help"
ACTION_VERSION = "version"
ACTION_STOP = "stop"


def is_true(value):
    return (value or "").strip().lower() in TRUE_VALUES


def get_defaults(environ=None):
    """Return the Config defaults taken from environment variables."""
    env = os.environ if environ is None else environ
    return Config(
        container_name=env.get(ENV_CONTAINER_NAME, ""),
        non_interactive=is_true(env.get(ENV_NON_INTERACTIVE)),
        verbose=is_true(env.get(ENV_VERBOSE)),
    )


def get_manager(environ=None):
    env = os.environ if environ is None else environ
    return env.get(ENV_CONTAINER_MANAGER) or runtime.AUTODETECT


def get_parser():
    """Parser used to render the usage text. Scanning is done by parse_args."""
    parser = argparse.ArgumentParser(
        prog=utils.PROG,
        description="Stop a container managed by podman or docker",
        epilog="Environment: {} (default name), {} (default --yes), {} (default --verbose), "
        "{} (autodetect | podman | docker)".format(
            ENV_CONTAINER_NAME, ENV_NON_INTERACTIVE, ENV_VERBOSE, ENV_CONTAINER_MANAGER
        ),
    )
    parser.add_argument("container", metavar="NAME", nargs="?", help="Container name")
    parser.add_argument("-n", "--name", metavar="NAME", help="Container name")
    parser.add_argument(
        "-Y", "--yes", action="store_true", help="Non-interactive, stop without asking"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show more verbosity")
    parser.add_argument("-V", "--version", action="store_true", help="Show version")
    return parser


def get_usage():
    return get_parser().format_help()


def parse_args(argv, defaults=None):
    """
    Scan argv left to right and return a ParseResult.

    action is ACTION_HELP or ACTION_VERSION when one of those flags was found (scanning
    stops there), ACTION_STOP otherwise. Raise ArgumentError if no container name is set.
    """
    config = defaults or Config(container_name="", non_interactive=False, verbose=False)
    name_given = False
    index = 0

    while index < len(argv):
        token = argv[index]

        if token in HELP_FLAGS:
            return ParseResult(ACTION_HELP, config)
        elif token in VERSION_FLAGS:
            return ParseResult(ACTION_VERSION, config)
        elif token in VERBOSE_FLAGS:
            config = config._replace(verbose=True)
        elif token in YES_FLAGS:
            config = config._replace(non_interactive=True)
        elif token in NAME_FLAGS:
            # Without a value the flag is ignored
            if index + 1 < len(argv):
                index += 1
                if argv[index]:
                    config = config._replace(container_name=argv[index])
                    name_given = True
        elif token == END_OF_OPTIONS:
            break
        elif not name_given and token:
            # Positional name, it may override the environment default
            config = config._replace(container_name=token)
            name_given = True
        else:
            break

        index += 1

    if not config.container_name:
        msg = "Please specify the name of the container."
        raise utils.ArgumentError(utils.with_help_hint(msg))

    return ParseResult(ACTION_STOP, config)

import logging
import os
import subprocess

PROG = "box-stop"
HELP_HINT = "See '{} --help' for more information.".format(PROG)


def get_logger():
    logger_ = logging.getLogger("box_stop")
    formatter = logging.Formatter("[box-stop:%(levelname)s] %(message)s")
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger_.addHandler(handler)
    logger_.setLevel(logging.WARNING)
    return logger_


class BoxStopError(Exception):
    exit_code = 1


class PrivilegeError(BoxStopError):
    exit_code = 1


class ArgumentError(BoxStopError):
    exit_code = 2


class DependencyError(BoxStopError):
    exit_code = 127


class NotFoundError(BoxStopError):
    exit_code = 1


class ConsentError(BoxStopError):
    exit_code = 1


class CommandError(BoxStopError):
    exit_code = 1


def with_help_hint(msg):
    return "{}\n{}".format(msg, HELP_HINT)


def check_privileges():
    """Raise PrivilegeError if the process runs with the superuser identity."""
    if os.geteuid() == 0:
        raise PrivilegeError(
            "Running {} as root is not supported. Run it as your regular user.".format(PROG)
        )


def run(command_parts, raise_on_error=True, capture_output=False, **kwargs):
    """Run command and return the result subprocess object."""
    cmd = subprocess.list2cmdline(command_parts)
    if capture_output:
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.PIPE

    try:
        logger.debug("Run: {}".format(cmd))
        return subprocess.run(command_parts, check=raise_on_error, **kwargs)
    except subprocess.CalledProcessError as exc:
        msg = "Command {} failed with code {}: {}"
        raise CommandError(msg.format(cmd, exc.returncode, exc.stderr))
    except OSError as exc:
        raise DependencyError(with_help_hint("Cannot run {}: {}".format(cmd, exc)))


logger = get_logger()

import collections
import shutil

from box_stop import utils

PRIMARY = "podman"
SECONDARY = "docker"
CANDIDATES = [PRIMARY, SECONDARY]
AUTODETECT = "autodetect"

DEBUG_ARGS = ["--log-level", "debug"]

Outcome = collections.namedtuple("Outcome", ["state", "returncode"])


class RuntimeBackend(collections.namedtuple("RuntimeBackend", ["name", "path", "verbose"])):
    __slots__ = ()

    def command(self, *args):
        """Return the argument vector for a back end subcommand."""
        return [self.path, *(DEBUG_ARGS if self.verbose else []), *args]


def get_candidates(manager=AUTODETECT):
    if manager == AUTODETECT:
        return CANDIDATES
    elif manager in CANDIDATES:
        return [manager]
    else:
        msg = "Invalid container manager: {} (expected: {})".format(
            manager, " | ".join([AUTODETECT, *CANDIDATES])
        )
        raise utils.ArgumentError(utils.with_help_hint(msg))


def resolve_runtime(config, manager=AUTODETECT):
    """
    Return the RuntimeBackend for the first candidate found in PATH (podman, then docker).

    Raise DependencyError if none is available.
    """
    candidates = get_candidates(manager)

    for name in candidates:
        path = shutil.which(name)
        if path:
            utils.logger.debug("Container manager: {} ({})".format(name, path))
            return RuntimeBackend(name=name, path=path, verbose=config.verbose)

    msg = "Missing dependency: we need a container manager. Please install one of: {}.".format(
        ", ".join(candidates)
    )
    raise utils.DependencyError(utils.with_help_hint(msg))


def container_exists(backend, container_name):
    """Return True if the back end knows a container with the given name."""
    cmd = backend.command("inspect", "--type", "container", container_name)
    result = utils.run(cmd, raise_on_error=False, capture_output=True)
    utils.logger.debug("Inspect {}: exit status {}".format(container_name, result.returncode))
    return result.returncode == 0


def stop_container(backend, container_name):
    """Stop the container, passing its output through. Return an Outcome."""
    result = utils.run(backend.command("stop", container_name), raise_on_error=False)
    state = "stopped" if result.returncode == 0 else "failed"
    return Outcome(state=state, returncode=result.returncode)

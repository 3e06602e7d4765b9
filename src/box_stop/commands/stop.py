from box_stop import consent, runtime, utils

DESCRIPTION = "Stop a container"


def run(config, backend):
    """Check the container exists, ask for confirmation and stop it. Return the exit code."""
    name = config.container_name

    if not runtime.container_exists(backend, name):
        msg = "Cannot find container {}.".format(name)
        raise utils.NotFoundError(utils.with_help_hint(msg))

    decision = consent.ask_consent(name, config.non_interactive)
    if decision == consent.DENIED:
        print("Aborted.")
        return 0
    elif decision == consent.INVALID:
        msg = "Invalid input.\nThe available choices are: {}.\nExiting.".format(
            consent.get_vocabulary()
        )
        raise utils.ConsentError(msg)

    utils.logger.info("Stop container: {}".format(name))
    outcome = runtime.stop_container(backend, name)
    utils.logger.debug("Stop {}: {} ({})".format(name, outcome.state, outcome.returncode))
    return outcome.returncode

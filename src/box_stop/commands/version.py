from importlib import metadata

from box_stop import utils

DESCRIPTION = "Show version"


def run(_config=None):
    version = get_version()
    if version:
        print("{}: {}".format(utils.PROG, version))
    else:
        print("Cannot get {} version".format(utils.PROG))
    return 0


def get_version():
    try:
        return metadata.version(utils.PROG)
    except metadata.PackageNotFoundError:
        return None

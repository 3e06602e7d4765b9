import sys

GRANTED = "granted"
DENIED = "denied"
INVALID = "invalid"

AFFIRMATIVE = ["y", "Y", "Yes", "yes", "YES"]
NEGATIVE = ["n", "N", "No", "no", "NO"]
DEFAULT_RESPONSE = "Y"


def classify(response):
    """Return the decision for a (case-sensitive) response. Empty means the default: Y."""
    value = response or DEFAULT_RESPONSE
    if value in AFFIRMATIVE:
        return GRANTED
    elif value in NEGATIVE:
        return DENIED
    else:
        return INVALID


def read_line(stream):
    # Like the shell `read` builtin: end of input is an empty response, blanks are trimmed
    try:
        line = stream.readline()
    except UnicodeDecodeError as exc:
        decoded = exc.object.decode(exc.encoding, "replace")
        line = (decoded.splitlines() or [""])[0]
    return line.strip(" \t\r\n")


def ask_consent(container_name, non_interactive, stdin=None, stdout=None):
    if non_interactive:
        return GRANTED

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write("Do you really want to stop {}? [Y/n]: ".format(container_name))
    stdout.flush()
    return classify(read_line(stdin))


def get_vocabulary():
    return "{} or {}".format(",".join(AFFIRMATIVE), ",".join(NEGATIVE))

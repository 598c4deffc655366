"""
Process exit codes for the tasktrack CLI.

Scripts driving ``tasktrack tasks ...`` can tell a rejected description
from a missing task or a server that is down without parsing output.
"""

SUCCESS = 0
ERROR_GENERAL = 1
# blank description, unknown config key, bad option value
ERROR_INVALID_ARGS = 2
# server unreachable, non-2xx status other than 400/404, undecodable body
ERROR_NETWORK = 4
ERROR_NOT_FOUND = 5

_EXIT_CODES: dict[int, tuple[str, str]] = {
    SUCCESS: ("SUCCESS", "Command executed successfully"),
    ERROR_GENERAL: ("ERROR_GENERAL", "A general error occurred"),
    ERROR_INVALID_ARGS: ("ERROR_INVALID_ARGS", "Invalid arguments or validation error"),
    ERROR_NETWORK: (
        "ERROR_NETWORK",
        "Could not talk to the task server - is 'tasktrack serve' running?",
    ),
    ERROR_NOT_FOUND: ("ERROR_NOT_FOUND", "Task not found"),
}


def get_exit_code_name(code: int) -> str:
    """Symbolic name of an exit code, for logs."""
    entry = _EXIT_CODES.get(code)
    return entry[0] if entry else f"UNKNOWN({code})"


def get_exit_code_description(code: int) -> str:
    """One-line explanation of an exit code, shown as a hint to the user."""
    entry = _EXIT_CODES.get(code)
    return entry[1] if entry else "Unknown error"

"""
Exit codes for the countdown CLI.
"""

# Success (including quitting with 'q')
SUCCESS = 0

# General error (terminal or rendering failure)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Interrupted with Ctrl-C
INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        INTERRUPTED: "INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_GENERAL: "The terminal display failed",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        INTERRUPTED: "Interrupted by the user",
    }
    return descriptions.get(code, "Unknown error")

"""ANSI color codes for terminal output.

All colors use the 256-color palette.

Usage:
    from liquid_core.logging.colors import GREEN, RESET

    print(f"{GREEN}Registered{RESET}")
"""

RESET = "\033[0m"

GREEN = "\033[38;5;82m"  # Registrations
RED = "\033[38;5;196m"  # Errors
YELLOW = "\033[38;5;226m"  # Warnings
LIGHT_BLUE = "\033[38;5;153m"  # Debug and context
CYAN = "\033[38;5;51m"  # Info
MAGENTA = "\033[38;5;201m"  # Config component

__all__ = [
    "RESET",
    "GREEN",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "MAGENTA",
]

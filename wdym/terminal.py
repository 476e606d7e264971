"""Terminal helpers: colours, confirmation prompts, shell detection."""

import os
import platform
from typing import Callable, Tuple

COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "reset": "\033[0m",
}

RULE = "─" * 61


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI colour; unknown colours leave it untouched."""
    code = COLORS.get(color)
    if code is None:
        return text
    return f"{code}{text}{COLORS['reset']}"


def truncate_string(s: str, max_len: int) -> str:
    if len(s) <= max_len:
        return s
    return s[:max_len - 3] + "..."


def print_block(title: str, body: str, color: str = "green") -> None:
    """Print a titled body between two horizontal rules."""
    print(f"\n{colorize(title, color)}")
    print(RULE)
    print(body)
    print(RULE)


def prompt_user(prompt: str, input_func: Callable[[str], str] = input) -> str:
    return input_func(prompt).strip()


def confirm_action(message: str, input_func: Callable[[str], str] = input) -> bool:
    """Ask a y/N question. Anything but y/yes, including EOF, means no."""
    try:
        response = prompt_user(f"{message} (y/N): ", input_func)
    except EOFError:
        return False
    return response.lower() in ("y", "yes")


def get_shell_info() -> Tuple[str, str]:
    """Return (shell name, OS name), e.g. ("zsh", "Darwin")."""
    shell = os.environ.get("SHELL", "")
    shell = os.path.basename(shell) if shell else "unknown"
    os_info = platform.system() or "unknown"
    return shell, os_info

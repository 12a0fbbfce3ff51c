"""Tagged console messages and screen clearing."""

import os
import subprocess
import sys

_RULE = "\n\n===========================================================\n\n"


def print_error(message: str) -> None:
    print(f"[Error] {message}", file=sys.stderr)


def print_info(message: str) -> None:
    print(f"[Info] {message}")


def print_warning(message: str) -> None:
    print(f"[Warning] {message}", file=sys.stderr)


def print_system(message: str) -> None:
    print(f"[System] {message}")


def print_line() -> None:
    print(_RULE)


def clear_screen() -> None:
    """Clear the terminal with the platform's clear command."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)
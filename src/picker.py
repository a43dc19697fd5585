"""Interface picker - list interfaces from `ip a` and select one.

Run with: python -m ifacepicker
Or: .venv/bin/ifacepicker
"""

import logging
import shlex
import subprocess
from typing import Iterator, Sequence

from .iproute import InterfaceRecord, parse_interfaces

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "ip a"


class PickerError(Exception):
    """Base class for interface picker errors."""


class CommandUnavailable(PickerError):
    """Raised when the interface listing command cannot be started."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Error opening pipe for command: {command} ({reason})")
        self.command = command


class InvalidSelection(PickerError):
    """Raised when the chosen menu entry does not exist."""


def list_interfaces(command: str = DEFAULT_COMMAND) -> list[InterfaceRecord]:
    """Run the listing command and parse its output.

    Raises:
        CommandUnavailable: If the command cannot be started.
    """
    try:
        argv = shlex.split(command)
    except ValueError as e:
        raise CommandUnavailable(command, str(e)) from e
    if not argv:
        raise CommandUnavailable(command, "empty command")

    logger.debug("Running %s", argv)
    try:
        # interface names may hold arbitrary bytes
        proc = subprocess.Popen(
            argv,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except (OSError, ValueError) as e:
        raise CommandUnavailable(command, str(e)) from e

    # Popen's context manager closes stdout and waits for the process
    with proc:
        records = parse_interfaces(proc.stdout)

    if proc.returncode:
        logger.warning("%s exited with status %d", command, proc.returncode)
    logger.debug("Parsed %d interfaces", len(records))
    return records


def format_menu(records: Sequence[InterfaceRecord]) -> Iterator[str]:
    """Generate the numbered interface menu."""
    yield "List of Interfaces and IP Addresses:\n"
    for i, record in enumerate(records, start=1):
        yield f"{i} - Interface: {record.name}, IP: {record.address}\n"
    yield "\n"


def select_interface(records: Sequence[InterfaceRecord], choice: str) -> InterfaceRecord:
    """Return the record for a 1-based menu choice.

    Raises:
        InvalidSelection: If the choice is not a number in [1, len(records)].
    """
    # only the first token is read, like a stream extraction
    tokens = choice.split()
    token = tokens[0] if tokens else ""
    if not (token.isascii() and token.isdigit()):
        raise InvalidSelection(f"Invalid interface index: {token!r}")

    index = int(token)

    if index < 1 or index > len(records):
        raise InvalidSelection(f"Invalid interface index: {index}")
    return records[index - 1]


def format_selection(record: InterfaceRecord) -> str:
    """Format the chosen interface as shell-consumable KEY=VALUE lines."""
    return f"IFACE={record.name}\nIPADDR={record.address}\n"

"""Command-line interface for ifacepicker."""

import argparse
import logging
import sys

from .picker import (
    DEFAULT_COMMAND,
    PickerError,
    format_menu,
    format_selection,
    list_interfaces,
    select_interface,
)

EPILOG = """\
Output:
  IFACE=<interface-name>
  IPADDR=<configured-ip>
"""


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ifacepicker",
        description=(
            "List and easily select network interfaces, "
            "displaying their respective IP addresses."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--command",
        default=DEFAULT_COMMAND,
        help=f"Interface listing command to run (default: {DEFAULT_COMMAND})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        records = list_interfaces(args.command)
        if not records:
            print("ifacepicker: no network interfaces found", file=sys.stderr)
            sys.exit(1)

        for line in format_menu(records):
            print(line, end="", flush=True)

        print("Choose an interface: ", end="", flush=True)
        choice = sys.stdin.readline()
        record = select_interface(records, choice)
        print(format_selection(record), end="", flush=True)
        sys.exit(0)

    except PickerError as e:
        print(f"ifacepicker: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n--- ifacepicker interrupted ---", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()

"""Interactive network interface picker."""

__version__ = "0.1.0"

from .iproute import (
    NO_ADDRESS,
    InterfaceRecord,
    iter_interfaces,
    parse_interfaces,
)
from .picker import (
    CommandUnavailable,
    InvalidSelection,
    PickerError,
    format_menu,
    format_selection,
    list_interfaces,
    select_interface,
)

__all__ = [
    "NO_ADDRESS",
    "InterfaceRecord",
    "iter_interfaces",
    "parse_interfaces",
    "PickerError",
    "CommandUnavailable",
    "InvalidSelection",
    "list_interfaces",
    "format_menu",
    "select_interface",
    "format_selection",
]

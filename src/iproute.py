"""Parser for `ip a` (iproute2 address listing) output.

Each interface starts with a header line such as

    2: eth0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc ...

followed by indented detail lines, one of which may carry the IPv4 address:

    inet 192.168.1.10/24 brd 192.168.1.255 scope global eth0
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

HEADER_MARKER = ": <"  # separates the interface name from its flags
INDEX_SEPARATOR = ": "
INET_MARKER = "inet "

NO_ADDRESS = "<no ip address>"


@dataclass(frozen=True)
class InterfaceRecord:
    """A network interface and its first IPv4 address."""

    name: str
    address: str = NO_ADDRESS

    @property
    def has_address(self) -> bool:
        return self.address != NO_ADDRESS


def _header_name(line: str, marker_pos: int) -> str:
    """Extract the interface name from a header line.

    The leading `<index>: ` token has variable width, so the name starts
    after the first `": "` rather than at a fixed offset.
    """
    sep = line.find(INDEX_SEPARATOR, 0, marker_pos)
    start = sep + len(INDEX_SEPARATOR) if sep != -1 else 0
    return line[start:marker_pos].strip()


def _inet_address(line: str, marker_pos: int) -> str:
    """Extract the address following the `inet ` marker, without prefix length."""
    start = marker_pos + len(INET_MARKER)
    end = line.find("/", start)
    if end == -1:
        # no prefix length, take the next token
        parts = line[start:].split()
        return parts[0] if parts else ""
    return line[start:end].strip()


def iter_interfaces(lines: Iterable[str]) -> Iterator[InterfaceRecord]:
    """Yield one InterfaceRecord per header line, in input order.

    Only the first `inet ` line of each block is used; secondary addresses
    and lines matching neither marker are skipped.
    """
    current: Optional[str] = None

    for line in lines:
        marker_pos = line.find(HEADER_MARKER)
        if marker_pos != -1:
            if current is not None:
                yield InterfaceRecord(current, NO_ADDRESS)

            name = _header_name(line, marker_pos)
            if not name:
                logger.debug("Skipping header without interface name: %r", line)
                current = None
                continue
            current = name
            continue

        if current is None:
            continue

        inet_pos = line.find(INET_MARKER)
        if inet_pos != -1:
            address = _inet_address(line, inet_pos) or NO_ADDRESS
            logger.debug("Found %s on %s", address, current)
            yield InterfaceRecord(current, address)
            current = None

    if current is not None:
        yield InterfaceRecord(current, NO_ADDRESS)


def parse_interfaces(lines: Iterable[str]) -> list[InterfaceRecord]:
    """Parse `ip a` output lines into a list of InterfaceRecord."""
    return list(iter_interfaces(lines))

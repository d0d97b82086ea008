"""MAC address value type, parsing and generation utilities."""

import random
import re
import secrets
from dataclasses import dataclass, replace
from typing import Self

from .errors import ParseError, ValidationError


MULTICAST_BIT = 0b0000_0001
LOCAL_BIT = 0b0000_0010

ADDRESS_PATTERN = re.compile(
    r"([a-f0-9]{2}):([a-f0-9]{2}):([a-f0-9]{2}):([a-f0-9]{2}):([a-f0-9]{2}):([a-f0-9]{2})",
    re.IGNORECASE,
)
ORGANIZATION_PATTERN = re.compile(r"([a-f0-9]{6})", re.IGNORECASE)

_system_random = secrets.SystemRandom()


@dataclass(frozen=True, order=True, slots=True)
class MacAddress:
    """An IEEE 802 MAC address made of six octets."""

    octet0: int
    octet1: int
    octet2: int
    octet3: int
    octet4: int
    octet5: int

    def __post_init__(self) -> None:
        for index, value in enumerate(self.octets):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValidationError(index, value)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Build an address from exactly six raw bytes."""

        if len(data) != 6:
            raise ValueError(f"A MAC address is exactly 6 bytes long, got {len(data)}")
        return cls(*data)

    @property
    def octets(self) -> tuple[int, int, int, int, int, int]:
        return (self.octet0, self.octet1, self.octet2, self.octet3, self.octet4, self.octet5)

    @property
    def packed(self) -> bytes:
        return bytes(self.octets)

    @property
    def organization(self) -> str:
        """The OUI as six lowercase hex digits, e.g. ``f497c2``."""

        return f"{self.octet0:02x}{self.octet1:02x}{self.octet2:02x}"

    @property
    def is_multicast(self) -> bool:
        """True for group addresses, False for unicast ones."""

        return (self.octet0 & MULTICAST_BIT) == MULTICAST_BIT

    @property
    def is_locally_administered(self) -> bool:
        """True for locally assigned addresses, False for OUI enforced ones."""

        return (self.octet0 & LOCAL_BIT) == LOCAL_BIT

    @property
    def is_broadcast(self) -> bool:
        return all(octet == 0xFF for octet in self.octets)

    def as_unicast(self) -> Self:
        return replace(self, octet0=self.octet0 & ~MULTICAST_BIT)

    def as_multicast(self) -> Self:
        return replace(self, octet0=self.octet0 | MULTICAST_BIT)

    def as_oui_enforced(self) -> Self:
        return replace(self, octet0=self.octet0 & ~LOCAL_BIT)

    def as_locally_administered(self) -> Self:
        return replace(self, octet0=self.octet0 | LOCAL_BIT)

    def __str__(self) -> str:
        return ":".join(f"{octet:02x}" for octet in self.octets)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


def parse(text: str) -> MacAddress:
    """Parse an address such as ``02:00:5e:10:00:01``.

    Leading and trailing whitespace is ignored, hex digits are case-insensitive.
    """

    match = ADDRESS_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(text, ADDRESS_PATTERN.pattern)
    return MacAddress(*(int(group, 16) for group in match.groups()))


def parse_organization(text: str) -> MacAddress:
    """Parse an OUI such as ``C419D1`` into an address with zeroed host octets."""

    match = ORGANIZATION_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(text, ORGANIZATION_PATTERN.pattern)

    base = int(match.group(1), 16)
    return MacAddress((base >> 16) & 0xFF, (base >> 8) & 0xFF, base & 0xFF, 0, 0, 0)


def generate(organization: MacAddress | None = None, rng: random.Random | None = None) -> MacAddress:
    """Generate a random MAC address.

    Six octets are always drawn from ``rng`` in order; when ``organization`` is
    given its OUI octets replace the first three draws.
    """

    if rng is None:
        rng = _system_random

    octets = [rng.randrange(256) for _ in range(6)]

    if organization is not None:
        octets[0:3] = organization.octets[0:3]

    return MacAddress(*octets)

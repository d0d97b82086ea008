"""Models describing addresses and generation requests."""

from typing import Annotated, Self

from pydantic import BaseModel, Field, field_validator

from ..core.mac import MacAddress, parse_organization
from ..core.model import DisplayModel


Count = Annotated[int, Field(ge=0)]
Attempts = Annotated[int, Field(ge=1)]


class AddressDescription(DisplayModel):
    """Classification of a single address."""

    address: str
    """Canonical colon separated form."""

    organization: str = Field(title="Organization (OUI)")
    """First three octets as six hex digits."""

    multicast: bool
    """Group address bit is set."""

    broadcast: bool
    """All octets are 0xff."""

    local: bool = Field(title="Locally administered")
    """Locally administered bit is set."""

    @classmethod
    def from_address(cls, address: MacAddress) -> Self:
        return cls(
            address=str(address),
            organization=address.organization,
            multicast=address.is_multicast,
            broadcast=address.is_broadcast,
            local=address.is_locally_administered,
        )

    def to_line(self) -> str:
        """Render as the one-line summary printed by ``describe``."""

        return (
            f"Address: {self.address}, "
            f"Multicast: {str(self.multicast).lower()}, "
            f"Broadcast: {str(self.broadcast).lower()}, "
            f"Local: {str(self.local).lower()}"
        )


class GenerationOptions(BaseModel):
    """Arguments for a batch of unique random addresses."""

    count: Count = 1
    """Number of distinct addresses to produce."""

    organization: str | None = None
    """OUI to copy into every address, e.g. 'C42996'."""

    multicast: bool = False
    """Force the multicast bit on."""

    unicast: bool = True
    """Force the multicast bit off, applied after multicast."""

    local: bool = False
    """Force the locally administered bit on."""

    max_attempts: Attempts | None = None
    """Give up after this many draws; None keeps drawing until done."""

    @field_validator("organization")
    @classmethod
    def _check_organization(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return parse_organization(v).organization

    @property
    def organization_address(self) -> MacAddress | None:
        if self.organization is None:
            return None
        return parse_organization(self.organization)

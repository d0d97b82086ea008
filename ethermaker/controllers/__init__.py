"""ethermaker controllers."""

from .addresses import AddressController


__all__ = [
    "AddressController",
]

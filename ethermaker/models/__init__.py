"""ethermaker models.

This package contains:
- address: Address descriptions and generation options
"""

from .address import AddressDescription, GenerationOptions


__all__ = [
    "AddressDescription",
    "GenerationOptions",
]

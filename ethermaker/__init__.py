"""ethermaker - MAC address inspection and generation."""

__version__ = "0.1.0"

from .core.application import Application
from .core.controller import BaseController
from .core.errors import EthermakerError, GenerationError, ParseError, ValidationError
from .core.mac import MacAddress, generate, parse, parse_organization
from .core.model import DisplayModel


__all__ = [
    "__version__",
    "Application",
    "BaseController",
    "DisplayModel",
    "EthermakerError",
    "GenerationError",
    "MacAddress",
    "ParseError",
    "ValidationError",
    "generate",
    "parse",
    "parse_organization",
]

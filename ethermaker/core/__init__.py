"""ethermaker core framework."""

from .application import Application
from .controller import BaseController
from .errors import EthermakerError, GenerationError, ParseError, ValidationError
from .mac import MacAddress, generate, parse, parse_organization
from .model import DisplayModel


__all__ = [
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

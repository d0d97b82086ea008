"""Errors raised by MAC address operations."""


class EthermakerError(Exception):
    """Base class for all ethermaker errors."""


class ValidationError(EthermakerError, ValueError):
    """An octet is outside of the range [0, 255]."""

    def __init__(self, octet: int, value: object) -> None:
        super().__init__(f"Octet {octet} must be an integer in the range [0, 255], got {value!r}")
        self.octet = octet
        self.value = value


class ParseError(EthermakerError, ValueError):
    """Text does not match the expected address or organization pattern."""

    def __init__(self, text: str, pattern: str) -> None:
        super().__init__(f"Could not parse {text!r}: expected a value matching {pattern}")
        self.text = text
        self.pattern = pattern


class GenerationError(EthermakerError, RuntimeError):
    """Batch generation gave up before reaching the requested count."""

    def __init__(self, count: int, attempts: int, generated: int) -> None:
        super().__init__(
            f"Generated only {generated} of {count} unique addresses after {attempts} attempts"
        )
        self.count = count
        self.attempts = attempts
        self.generated = generated

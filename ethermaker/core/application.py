"""Application singleton with dependency injection for controllers."""

import logging
from typing import Any, Self

from rich.console import Console
from rich.logging import RichHandler

from ..controllers.addresses import AddressController


LOGGER_NAME = "ethermaker"


class Application:
    """Main application."""

    _instance: Self | None = None

    def __init__(self) -> None:
        self._console = Console(highlight=False)
        self._err_console = Console(stderr=True)
        self._controllers: dict[str, Any] = {}
        self._debug: bool = False

    @classmethod
    def current(cls) -> Self:
        """Get current application instance."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance."""

        cls._instance = None

    @property
    def console(self) -> Console:
        """Get rich console for user-facing output."""

        return self._console

    @property
    def err_console(self) -> Console:
        """Get rich console for diagnostics."""

        return self._err_console

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(LOGGER_NAME)

    @property
    def debug(self) -> bool:
        """Get debug mode flag."""

        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        """Set debug mode flag."""

        self._debug = value
        self.logger.setLevel(logging.DEBUG if value else logging.INFO)

    def setup_logging(self) -> None:
        """Route the package logger through a rich handler on stderr."""

        logger = self.logger
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)

        handler = RichHandler(console=self._err_console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if self._debug else logging.INFO)
        logger.propagate = False

    @property
    def addresses(self) -> AddressController:
        """Get address controller."""

        if "addresses" not in self._controllers:
            self._controllers["addresses"] = AddressController(self)
        return self._controllers["addresses"]

import logging

from rich.logging import RichHandler

from ethermaker.controllers import AddressController
from ethermaker.core.application import Application


def test_current_is_singleton():
    assert Application.current() is Application.current()


def test_reset_creates_new_instance():
    first = Application.current()
    Application.reset()

    assert Application.current() is not first


def test_controller_is_cached(app):
    assert isinstance(app.addresses, AddressController)
    assert app.addresses is app.addresses
    assert app.addresses.app is app


def test_setup_logging_installs_one_rich_handler(app):
    app.setup_logging()
    app.setup_logging()

    handlers = [h for h in app.logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert app.logger.level == logging.INFO


def test_debug_lowers_level(app):
    app.debug = True
    app.setup_logging()

    assert app.logger.level == logging.DEBUG

"""CLI conftest: drop the logging handler each invocation installs."""

import logging

import pytest

from core import logging_utils


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    yield
    handler = logging_utils._installed_handler
    if handler is not None:
        logging.root.removeHandler(handler)
        logging_utils._installed_handler = None
    logging.root.setLevel(logging.WARNING)

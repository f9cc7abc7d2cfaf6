from __future__ import annotations

import logging

import pytest

from qrterm.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_qrterm_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers:
        handler.close()
    root.handlers = [logging.NullHandler()]
    root.setLevel(logging.NOTSET)

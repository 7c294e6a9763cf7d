import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_catalog_logger():
    """Undo ``configure_logging`` so caplog keeps seeing ``catalog.*`` records."""
    yield
    logger = logging.getLogger("catalog")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

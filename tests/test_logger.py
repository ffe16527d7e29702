import logging
from rich.logging import RichHandler
from caption_extractor.utils.logger import logger, setup_logger


def test_package_logger_leaves_root_alone():
    assert logger.name == "caption_extractor"
    assert logger.propagate is False
    assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


def test_setup_is_idempotent():
    assert setup_logger() is logger
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

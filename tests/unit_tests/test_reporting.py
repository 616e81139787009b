import logging
import os
import sys

import pytest
from conftest import random_tempfolder

from peptidesieve import reporting


@pytest.fixture
def restore_root_logger():
    logger = logging.getLogger()
    handlers, level = logger.handlers, logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_progress_level_registered():
    assert logging.getLevelName(reporting.PROGRESS_LEVELV_NUM) == "PROGRESS"
    assert hasattr(logging.getLogger(), "progress")


@pytest.mark.skipif(sys.platform == "win32", reason="does not run on windows")
def test_logging(restore_root_logger):
    reporting.__is_initiated__ = False

    tempfolder = random_tempfolder()

    reporting.init_logging(tempfolder)

    python_logger = logging.getLogger()
    python_logger.progress("test")
    python_logger.info("test")
    python_logger.warning("test")
    python_logger.error("test")
    python_logger.critical("test")
    python_logger.debug("not logged")

    for handler in python_logger.handlers:
        handler.flush()

    assert reporting.__is_initiated__
    log_name = os.path.join(tempfolder, reporting.LOG_FILE_NAME)
    assert os.path.exists(log_name)
    with open(log_name) as f:
        lines = f.readlines()
    assert len(lines) == 5
    assert "PROGRESS: test" in lines[0]
    # file handler writes without ANSI codes
    assert all("\x1b[" not in line for line in lines)


def test_logging_overwrites_existing_file(restore_root_logger):
    # given
    tempfolder = random_tempfolder()
    log_name = os.path.join(tempfolder, reporting.LOG_FILE_NAME)
    with open(log_name, "w") as f:
        f.write("old line\n")

    # when
    reporting.init_logging(tempfolder)
    logging.getLogger().info("new line")
    for handler in logging.getLogger().handlers:
        handler.flush()

    # then
    with open(log_name) as f:
        content = f.read()
    assert "old line" not in content
    assert "new line" in content


def test_default_formatter_ansi():
    # given
    record = logging.LogRecord("test", logging.WARNING, "", 0, "message", None, None)

    # when
    colored = reporting.DefaultFormatter(use_ansi=True).format(record)
    plain = reporting.DefaultFormatter(use_ansi=False).format(record)

    # then
    assert reporting.DefaultFormatter.yellow in colored
    assert plain.endswith("WARNING: message")

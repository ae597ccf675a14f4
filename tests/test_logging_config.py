from __future__ import annotations

import logging
import sys

from objmesh.logging_config import setup_logging


def test_defaults_to_warning_on_stderr():
    logger = setup_logging()

    assert logger.name == "objmesh"
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"))
    logger = setup_logging("DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_records_reach_stderr_only(capsys):
    setup_logging(logging.INFO)
    logging.getLogger("objmesh.model.io").info("hello from the loader")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert " - objmesh.model.io - INFO - hello from the loader" in captured.err

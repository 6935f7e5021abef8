# backend/tests/test_logging_conf.py
import logging

from core.logging_conf import setup_logging


def test_setup_logging_keeps_foreign_handlers_and_does_not_stack():
    root = logging.getLogger()
    before_level = root.level
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert foreign in root.handlers
        ours = [h for h in root.handlers if h.__class__.__name__ == "_AppConsoleHandler"]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.removeHandler(foreign)
        for h in [h for h in root.handlers if h.__class__.__name__ == "_AppConsoleHandler"]:
            root.removeHandler(h)
        root.setLevel(before_level)


def test_setup_logging_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    before_level = root.level
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        for h in [h for h in root.handlers if h.__class__.__name__ == "_AppConsoleHandler"]:
            root.removeHandler(h)
        root.setLevel(before_level)

import logging

import catx


def test_configure_logging_sets_package_level():
    catx.configure_logging("debug")
    assert logging.getLogger("catx").level == logging.DEBUG
    catx.configure_logging(logging.ERROR)
    assert logging.getLogger("catx").level == logging.ERROR


def test_configure_logging_unknown_level_falls_back_to_warning():
    catx.configure_logging("chatty")
    assert logging.getLogger("catx").level == logging.WARNING

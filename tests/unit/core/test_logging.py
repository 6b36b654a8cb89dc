from unittest.mock import MagicMock

from studybuddy.core.config import Settings
from studybuddy.core.logging import (
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
    rename_message_field,
)


def test_new_correlation_id_is_unique():
    first = new_correlation_id()

    assert first.startswith("cid_")
    assert first != new_correlation_id()


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(MagicMock(), "info", {"correlation_id": "req-1"})

    assert event["correlation_id"] == "req-1"


def test_add_correlation_id_fills_missing():
    event = add_correlation_id(MagicMock(), "info", {"event": "x"})

    assert event["correlation_id"].startswith("cid_")


def test_rename_message_field():
    assert rename_message_field(MagicMock(), "info", {"event": "hello"}) == {"message": "hello"}


def test_configure_json_logging_emits_message(capsys):
    configure_logging(Settings(environment="testing", log_format="json"))
    bind_correlation_id("req-42")
    try:
        get_logger("studybuddy.test").info("Something happened", account_id="acc-1")
    finally:
        clear_context()
        configure_logging(Settings(environment="testing", log_format="console"))

    output = capsys.readouterr().out
    assert '"message": "Something happened"' in output
    assert '"correlation_id": "req-42"' in output
    assert '"account_id": "acc-1"' in output

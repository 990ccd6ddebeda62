import logging

from dashboard.config import DEFAULT_SESSION_SECRET
from dashboard.main import create_app


def test_default_session_secret_is_warned_about(engine, cache, caplog):
    with caplog.at_level(logging.WARNING, logger="dashboard.main"):
        create_app(engine=engine, cache=cache, session_secret=DEFAULT_SESSION_SECRET)

    assert "SESSION_SECRET is not set" in caplog.text


def test_configured_session_secret_is_quiet(engine, cache, caplog):
    with caplog.at_level(logging.WARNING, logger="dashboard.main"):
        create_app(engine=engine, cache=cache, session_secret="s3cr3t-from-env")

    assert "SESSION_SECRET" not in caplog.text

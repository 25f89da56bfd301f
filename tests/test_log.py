import logging

from BackEnd.core.log import configure_logging


def test_configure_logging_writes_file(tmp_path):
    target = tmp_path / "tracker.log"
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        configure_logging(level="INFO", log_file=target)
        logging.getLogger("BackEnd.test").warning("table 3 save failed")
        for handler in root.handlers:
            handler.flush()
        text = target.read_text(encoding="utf-8")
        assert "table 3 save failed" in text
        assert "WARNING - BackEnd.test" in text
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_unknown_level_falls_back_to_info(tmp_path):
    target = tmp_path / "tracker.log"
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        configure_logging(level="VERBOSE", log_file=target)
        file_handlers = [h for h in root.handlers if h not in before and isinstance(h, logging.FileHandler)]
        assert [h.level for h in file_handlers] == [logging.INFO]
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_env_log_level_is_validated(monkeypatch):
    from BackEnd.core import config

    monkeypatch.setenv("POOL_LOG_LEVEL", "verbose")
    assert config._env_level("POOL_LOG_LEVEL", "INFO") == "INFO"
    monkeypatch.setenv("POOL_LOG_LEVEL", " debug ")
    assert config._env_level("POOL_LOG_LEVEL", "INFO") == "DEBUG"

import json
import logging

from navalchess.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"]["custom"] == 1


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("NAVALCHESS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("NAVALCHESS_LOG_DIR", raising=False)
    monkeypatch.delenv("NAVALCHESS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.endswith(".jsonl")


def test_configure_logging_writes_under_app_data_logs(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("NAVALCHESS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("NAVALCHESS_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "text")
    configure_logging(build_logging_config())
    assert logging.getLogger().level == logging.DEBUG

    logging.getLogger("test.logging.file.path").info("hello")
    configure_logging(LoggingConfig())

    files = list((tmp_path / "appdata" / "logs").glob("navalchess_run_*.jsonl"))
    assert files
    assert "hello" in files[0].read_text(encoding="utf-8")

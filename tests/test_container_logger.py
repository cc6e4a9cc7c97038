import json
import logging

from wirebox.shared.logger.container_logger import ContainerLogger


def test_console_output(capsys):
    logger = ContainerLogger(name="test.console", level="DEBUG")
    logger.info("Dependency registered", name="config")

    err = capsys.readouterr().err
    assert "[test.console] INFO: Dependency registered" in err
    assert "name='config'" in err


def test_level_filters_messages(capsys):
    logger = ContainerLogger(name="test.level", level="WARNING")
    logger.debug("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_file_output_is_json(tmp_path):
    log_file = tmp_path / "wirebox.log"
    logger = ContainerLogger(name="test.file", log_file=str(log_file), level="INFO")
    logger.error("Service producer returned None", name="svc")

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "Service producer returned None"
    assert record["name"] == "svc"
    assert record["level"] == "error"


def test_logger_is_cached_without_stacking_handlers():
    ContainerLogger(name="test.cached")
    ContainerLogger(name="test.cached")
    assert len(logging.getLogger("test.cached.console").handlers) == 1


def test_cached_logger_binds_new_context(capsys):
    ContainerLogger(name="test.context", level="INFO")
    logger = ContainerLogger(name="test.context", level="INFO", context={"container": "orders"})
    logger.info("Dependency registered")

    err = capsys.readouterr().err
    assert "container='orders'" in err


def test_same_name_can_run_at_different_levels(capsys):
    quiet = ContainerLogger(name="test.levels", level="ERROR")
    chatty = ContainerLogger(name="test.levels", level="DEBUG")
    quiet.info("from quiet")
    chatty.debug("from chatty")

    err = capsys.readouterr().err
    assert "from quiet" not in err
    assert "from chatty" in err

import io
import re

import pytest

from sceneview.logger import LogLevel, Logger, level_name

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] \[(\w+)\] (.*)$")


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def logger(stream):
    with Logger(stream) as log:
        yield log


def lines(stream):
    return stream.getvalue().splitlines()


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARNING"),
        (LogLevel.CRITICAL, "CRITICAL"),
        (LogLevel.FATAL, "FATAL"),
    ],
)
def test_level_name(level, name):
    assert level_name(level) == name


def test_level_name_unknown():
    assert level_name(99) == "UNKNOWN"


def test_levels_are_ordered():
    names = [level_name(level) for level in sorted(LogLevel)]
    assert names == ["DEBUG", "INFO", "WARNING", "CRITICAL", "FATAL"]


def test_line_format(stream):
    with Logger(stream) as log:
        log.info("hello world")
    match = LINE.match(lines(stream)[0])
    assert match is not None
    assert match.groups() == ("INFO", "hello world")


@pytest.mark.parametrize(
    "method, name",
    [
        ("debug", "DEBUG"),
        ("info", "INFO"),
        ("warning", "WARNING"),
        ("critical", "CRITICAL"),
        ("fatal", "FATAL"),
    ],
)
def test_convenience_methods_use_their_level(stream, method, name):
    with Logger(stream) as log:
        getattr(log, method)("msg")
    assert LINE.match(lines(stream)[0]).groups() == (name, "msg")


def test_default_level_lets_debug_through(logger, stream):
    assert logger.level == LogLevel.DEBUG
    logger.debug("x")
    assert len(lines(stream)) == 1


def test_messages_below_level_are_dropped(stream):
    with Logger(stream) as log:
        log.set_log_level(LogLevel.WARNING)
        assert log.level == LogLevel.WARNING
        log.debug("a")
        log.info("b")
        log.warning("c")
        log.fatal("d")
    assert [LINE.match(line).group(2) for line in lines(stream)] == ["c", "d"]


def test_unknown_level_above_threshold_is_logged(stream):
    with Logger(stream) as log:
        log.log(99, "odd")
    assert LINE.match(lines(stream)[0]).groups() == ("UNKNOWN", "odd")


def test_set_log_level_rejects_invalid(logger):
    with pytest.raises(ValueError):
        logger.set_log_level(42)


def test_file_logging_writes_and_appends(logger, stream, tmp_path):
    path = tmp_path / "app.log"
    path.write_text("existing\n", encoding="utf-8")
    assert logger.set_log_to_file(True, str(path)) is True
    assert logger.log_file_path == str(path)
    logger.info("to file")
    logger.close()
    content = path.read_text(encoding="utf-8").splitlines()
    assert content[0] == "existing"
    assert LINE.match(content[1]).groups() == ("INFO", "to file")
    assert lines(stream)[0] == content[1]


def test_disabling_file_logging_stops_writes(logger, tmp_path):
    path = tmp_path / "app.log"
    logger.set_log_to_file(True, str(path))
    logger.info("one")
    assert logger.set_log_to_file(False) is False
    logger.info("two")
    assert len(path.read_text(encoding="utf-8").splitlines()) == 1
    assert logger.logging_to_file is False


def test_unopenable_file_disables_file_logging(logger, tmp_path, capsys):
    assert logger.set_log_to_file(True, str(tmp_path)) is False
    assert logger.logging_to_file is False
    assert "Failed to open log file" in capsys.readouterr().err


def test_default_stream_is_stdout(capsys):
    log = Logger()
    log.warning("console")
    assert LINE.match(capsys.readouterr().out.strip()).groups() == ("WARNING", "console")


def test_instance_is_shared():
    shared = Logger.instance()
    original = shared.level
    try:
        Logger.instance().set_log_level(LogLevel.CRITICAL)
        assert shared.level == LogLevel.CRITICAL
    finally:
        shared.set_log_level(original)
    assert Logger.instance().level == original
import logging

import pytest
from typer.testing import CliRunner

from termselect import __version__, config
from termselect import select as select_module
from termselect.app import app

from .helpers import DOWN, ENTER, UP, ScriptedReader

runner = CliRunner()


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "get_data_dir", lambda: tmp_path)
    return tmp_path


def _last_line(result) -> str:
    return result.stdout.strip().splitlines()[-1]


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"termselect version: {__version__}" in result.stdout


def test_pick_prints_the_answer():
    result = runner.invoke(app, ["pick", "red", "green", "blue"], input="\x1b[B\n")
    assert result.exit_code == 0
    assert _last_line(result) == "green"


def test_pick_honors_the_default():
    result = runner.invoke(
        app, ["pick", "red", "green", "blue", "--default", "blue"], input="\r"
    )
    assert result.exit_code == 0
    assert _last_line(result) == "blue"


def test_pick_with_emacs_keys_and_small_page():
    result = runner.invoke(
        app, ["pick", "a", "b", "c", "d", "e", "-p", "2"], input="\x10\x10\n"
    )
    assert result.exit_code == 0
    assert _last_line(result) == "d"


def test_pick_interrupt_aborts():
    result = runner.invoke(app, ["pick", "red", "green"], input="\x03")
    assert result.exit_code == 1
    assert "operation cancelled" in result.output


def test_pick_closed_input_aborts():
    result = runner.invoke(app, ["pick", "red", "green"], input="\x1b[B")
    assert result.exit_code == 1
    assert "input stream closed" in result.output


def test_pick_requires_options():
    result = runner.invoke(app, ["pick"])
    assert result.exit_code != 0


def test_demo(monkeypatch):
    readers = iter([ScriptedReader([DOWN, ENTER]), ScriptedReader([UP, ENTER])])
    monkeypatch.setattr(select_module, "RuneReader", lambda: next(readers))

    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "you chose b." in result.stdout
    assert "you chose j." in result.stdout


def test_settings_show_defaults():
    result = runner.invoke(app, ["settings"])
    assert result.exit_code == 0
    assert "page_size" in result.stdout
    assert "help_input_rune" in result.stdout


def test_settings_page_size_is_persisted(data_dir):
    result = runner.invoke(app, ["settings", "page-size", "3"])
    assert result.exit_code == 0
    assert config.load_config().page_size == 3
    assert (data_dir / "settings.json").exists()


def test_settings_rejects_invalid_values():
    result = runner.invoke(app, ["settings", "page-size", "0"])
    assert result.exit_code == 1
    assert config.load_config().page_size == config.DEFAULT_PAGE_SIZE

    result = runner.invoke(app, ["settings", "help-rune", "ab"])
    assert result.exit_code == 1


def test_settings_are_used_by_pick():
    runner.invoke(app, ["settings", "page-size", "2"])
    runner.invoke(app, ["settings", "help-rune", "h"])
    result = runner.invoke(
        app, ["pick", "a", "b", "c", "--help-text", "letters"], input="h\n"
    )
    assert result.exit_code == 0
    assert "[h for help]" in result.output
    assert "letters" in result.output


def test_settings_reset():
    runner.invoke(app, ["settings", "page-size", "2"])
    result = runner.invoke(app, ["settings", "reset"])
    assert result.exit_code == 0
    assert config.load_config() == config.Settings()


def test_corrupt_settings_fall_back_to_defaults(data_dir):
    (data_dir / "settings.json").write_text("{not json")
    assert config.load_config() == config.Settings()


def test_verbose_writes_debug_log(data_dir):
    logger = logging.getLogger("termselect")
    handlers = list(logger.handlers)
    try:
        result = runner.invoke(app, ["-v", "pick", "a", "b"], input="\n")
        assert result.exit_code == 0
        runner.invoke(app, ["-v", "pick", "a", "b"], input="\n")
        assert len(logger.handlers) == len(handlers) + 1
        for handler in logger.handlers:
            handler.flush()
        assert "answered 'a'" in (data_dir / "termselect.log").read_text()
    finally:
        for handler in logger.handlers[len(handlers) :]:
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

import io

import pytest
from rich.console import Console

from smg_cli.cli_utils.answer_collector import AnswerCollector, answers_to_config
from smg_cli.config_utils.smg_config import SmgConfig
from smg_cli.engine.invocation_options import InvocationOptions


@pytest.fixture
def typed(monkeypatch):
    """Feed canned keyboard input to the rich prompts."""

    def _feed(*lines):
        replies = iter(lines)
        monkeypatch.setattr("builtins.input", lambda *args: next(replies))

    return _feed


def make_collector(config=None):
    console = Console(file=io.StringIO(), force_terminal=False, width=120)
    return AnswerCollector(config or SmgConfig(), console=console)


def test_blank_answers_take_saved_defaults(typed):
    typed("", "", "", "")
    assert make_collector().collect() == InvocationOptions(
        model="HR",
        tables="employees,departments,jobs",
        data_output="data/synthetic_data.sql",
        synthetic_generate="employees(100),departments(50),jobs(10)",
    )


def test_typed_answers_are_returned(typed):
    typed("OE", "orders", "oe.sql", "orders(7)")
    options = make_collector().collect()
    assert options.model == "OE"
    assert options.tables == "orders"
    assert options.data_output == "oe.sql"
    assert options.synthetic_generate == "orders(7)"
    assert options.diagram is None


def test_model_outside_choices_is_asked_again(typed):
    typed("MySQL", "Invest", "", "", "")
    assert make_collector().collect().model == "Invest"


def test_confirm_save(typed):
    typed("y")
    assert make_collector().confirm_save() is True
    typed("")
    assert make_collector().confirm_save() is False


def test_answers_to_config_splits_tables():
    config = answers_to_config(
        InvocationOptions(model="OE", tables=" orders , customers,,"),
        SmgConfig(),
    )
    assert config.model == "OE"
    assert config.tables == ["orders", "customers"]
    assert config.data_output == "data/synthetic_data.sql"

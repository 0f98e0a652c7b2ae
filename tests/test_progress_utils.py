import io

from rich.console import Console

from smg_cli.cli_utils.progress_utils import ProgressIndicator


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120)


def test_update_replaces_text():
    indicator = ProgressIndicator().start()
    indicator.update("Parsing schema")
    indicator.update("Generating rows")
    assert indicator.text == "Generating rows"
    assert indicator.active


def test_update_before_start_is_ignored():
    indicator = ProgressIndicator(text="waiting")
    indicator.update("ignored")
    assert indicator.text == "waiting"


def test_succeed_prints_once():
    console = make_console()
    indicator = ProgressIndicator(console).start()
    indicator.succeed("All done")
    indicator.succeed("All done again")
    indicator.fail("Too late")
    output = console.file.getvalue()
    assert "✔ All done" in output
    assert "All done again" not in output
    assert "Too late" not in output
    assert not indicator.active


def test_stop_suppresses_later_messages():
    console = make_console()
    indicator = ProgressIndicator(console).start()
    indicator.stop()
    indicator.fail("Generation failed with exit code 1.")
    assert "Generation failed" not in console.file.getvalue()


def test_context_manager_stops_on_exit():
    with ProgressIndicator() as indicator:
        assert indicator.active
    assert not indicator.active


def test_fail_marks_message_once():
    console = make_console()
    indicator = ProgressIndicator(console).start()
    indicator.fail("Generation failed with exit code 2.")
    output = console.file.getvalue()
    assert "✖ Generation failed with exit code 2." in output
    assert output.count("✖") == 1

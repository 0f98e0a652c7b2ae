import logging

from rich.logging import RichHandler

from smg_cli.logging_utils import LOG_FILE_NAME, configure_logging


def test_logs_go_to_file_in_working_directory(tmp_path):
    logger = configure_logging()
    logging.getLogger("smg_cli.engine.engine_executor").info("Starting engine: java -jar x.jar")
    for handler in logger.handlers:
        handler.flush()
    assert "Starting engine" in (tmp_path / LOG_FILE_NAME).read_text()


def test_console_level_follows_verbose(tmp_path):
    quiet = configure_logging(log_file=tmp_path / "a.log")
    rich_handlers = [h for h in quiet.handlers if isinstance(h, RichHandler)]
    assert rich_handlers[0].level == logging.WARNING

    loud = configure_logging(verbose=True, log_file=tmp_path / "b.log")
    rich_handlers = [h for h in loud.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].level == logging.DEBUG


def test_unwritable_log_file_keeps_console_handler(tmp_path):
    logger = configure_logging(log_file=tmp_path / "missing" / "smg-cli.log")
    assert [type(h) for h in logger.handlers] == [RichHandler]

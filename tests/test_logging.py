import logging

from expression_parser import LogLevel, configure_logging, set_log_level, get_logger


def test_default_level_is_minimal():
    assert configure_logging().log_level == LogLevel.MINIMAL


def test_level_filters_messages(caplog):
    logger = configure_logging(LogLevel.MODERATE)
    try:
        with caplog.at_level(logging.DEBUG, logger='expression_parser'):
            logger.info("shown", LogLevel.MODERATE)
            logger.info("hidden", LogLevel.DETAILED)
            logger.debug("trial detail")
        messages = [record.getMessage() for record in caplog.records]
        assert "shown" in messages
        assert "hidden" not in messages
        assert not any("trial detail" in m for m in messages)
    finally:
        configure_logging(LogLevel.MINIMAL)


def test_set_log_level_updates_global_logger():
    logger = configure_logging(LogLevel.MINIMAL)
    try:
        set_log_level(LogLevel.VERBOSE)
        assert get_logger() is logger
        assert logger.log_level == LogLevel.VERBOSE
    finally:
        configure_logging(LogLevel.MINIMAL)


def test_silent_level_suppresses_warnings(parser, caplog):
    configure_logging(LogLevel.SILENT)
    try:
        with caplog.at_level(logging.DEBUG, logger='expression_parser'):
            parser.parse("3 2")
        assert not caplog.records
    finally:
        configure_logging(LogLevel.MINIMAL)


def test_corrected_parse_warns_at_default_level(parser, caplog):
    configure_logging(LogLevel.MINIMAL)
    with caplog.at_level(logging.DEBUG, logger='expression_parser'):
        parser.parse("3 2")
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "'3 * 2'" in warnings[0].getMessage()


def test_file_logging(tmp_path):
    path = tmp_path / "parser.log"
    logger = configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(path))
    try:
        logger.warning("written to file")
        for handler in logger.logger.handlers:
            handler.flush()
        assert "written to file" in path.read_text()
    finally:
        for handler in logger.logger.handlers:
            handler.close()
        configure_logging(LogLevel.MINIMAL)


def test_verbose_level_reports_each_trial(parser, caplog):
    configure_logging(LogLevel.VERBOSE)
    try:
        with caplog.at_level(logging.DEBUG, logger='expression_parser'):
            parser.parse("3 2")
        trials = [r for r in caplog.records if r.levelno == logging.DEBUG]
        # '1' is inserted and rejected before '*' succeeds
        assert len(trials) == 1
        assert "'3 1 2'" in trials[0].getMessage()
    finally:
        configure_logging(LogLevel.MINIMAL)

"""
Message and logging tests.
"""

import logging

import pytest

from confscout.errors import ConfscoutError
from confscout.messages import Level, Message, message
from confscout.utils.logger import MessageLogger, _parse_size, setup_logging


def test_message_text():
    msg = message(Level.WARNING, 'multiple_files', '/x/.toolrc')

    assert msg.parameters == ('/x/.toolrc',)
    assert msg.text == "Multiple configuration files found for /x/.toolrc, using the first one"
    assert str(msg) == f"WARNING: {msg.text}"


def test_unknown_message_id():
    with pytest.raises(ValueError):
        Message(Level.ERROR, 'no_such_message')


def test_error_carries_message():
    error = ConfscoutError('file_not_found', './missing.yaml')

    assert error.internal_message.level == Level.ERROR
    assert str(error) == "Configuration file ./missing.yaml not found"


@pytest.mark.parametrize('level,log_level', [
    (Level.TRACE, logging.DEBUG),
    (Level.INFORMATION, logging.INFO),
    (Level.WARNING, logging.WARNING),
    (Level.ERROR, logging.ERROR),
])
def test_message_logger_levels(caplog, level, log_level):
    with caplog.at_level(logging.DEBUG, logger='confscout'):
        MessageLogger()(message(level, 'loading_file', '/x/app.yaml'))

    record = caplog.records[-1]
    assert record.name == 'confscout'
    assert record.levelno == log_level
    assert record.getMessage() == "Loading configuration file /x/app.yaml"
    assert record.message_id == 'loading_file'
    assert record.parameters == ('/x/app.yaml',)


@pytest.mark.parametrize('size,expected', [
    ('512', 512),
    ('2KB', 2048),
    ('10MB', 10 * 1024 * 1024),
    ('1gb', 1024 ** 3),
])
def test_parse_size(size, expected):
    assert _parse_size(size) == expected


def test_setup_logging_with_file(tmp_path, restore_logging):
    log_file = tmp_path / 'logs' / 'confscout.log'

    logger = setup_logging(log_level='debug', log_file=str(log_file))
    logger.warning('written to file')
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert 'written to file' in log_file.read_text(encoding='utf-8')


def test_setup_logging_replaces_handlers(restore_logging):
    setup_logging()
    setup_logging(log_level='WARNING')

    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info(restore_logging):
    setup_logging(log_level='chatty')

    assert logging.getLogger().level == logging.INFO

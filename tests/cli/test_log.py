import logging
from pathlib import Path
import pytest
from capsink.cli import conf
from capsink.cli.log import configure_logging, CLI_LOGGER_NAME


@pytest.fixture
def bare_root(monkeypatch):
    root_logger = logging.getLogger()
    monkeypatch.setattr(root_logger, 'handlers', [])
    capsink_logger = logging.getLogger('capsink')
    level = capsink_logger.level
    yield root_logger
    capsink_logger.setLevel(level)


def test_level_applies_to_capsink_logger_only(bare_root):
    root_level = bare_root.level
    config = conf.Configuration.from_dict(Path('.'), {'logging': {'level': 'debug'}})
    log = configure_logging(config)
    assert log.name == CLI_LOGGER_NAME
    assert logging.getLogger('capsink').level == logging.DEBUG
    assert bare_root.level == root_level, "root level must be left alone"


def test_installs_formatted_handler(bare_root):
    config = conf.Configuration.from_dict(Path('.'), {
        'logging': {'format': '%(levelname)s %(message)s', 'datefmt': '%H:%M'}})
    configure_logging(config)
    assert len(bare_root.handlers) == 1
    formatter = bare_root.handlers[0].formatter
    assert formatter._fmt == '%(levelname)s %(message)s'
    assert formatter.datefmt == '%H:%M'

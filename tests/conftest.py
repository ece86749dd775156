import pytest

from expression_parser import Parser, VariableRegistry, LogLevel, configure_logging


@pytest.fixture
def registry():
    """Fresh registry so tests never share variable values"""
    return VariableRegistry()


@pytest.fixture
def parser(registry):
    return Parser(registry=registry)


@pytest.fixture
def x(registry):
    return registry.lookup_or_create('x')


@pytest.fixture
def detailed_logging():
    logger = configure_logging(LogLevel.DETAILED)
    yield logger
    configure_logging(LogLevel.MINIMAL)

import logging

import numpy as np
import pytest

from modevo import DEConfig, SphereProblem, build_differential_evolution, configure_modevo_logging
from modevo.foundation.logging import LOGGER_NAME


@pytest.fixture
def clean_loggers():
    root = logging.getLogger()
    logger = logging.getLogger(LOGGER_NAME)
    saved_root = root.handlers[:]
    saved = (logger.handlers[:], logger.level, logger.propagate)
    root.handlers = []
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    root.handlers = saved_root
    logger.handlers, level, logger.propagate = saved
    logger.setLevel(level)


def test_attaches_a_handler_when_nothing_is_configured(clean_loggers):
    logger = configure_modevo_logging(level="debug")
    assert logger is clean_loggers
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_respects_existing_application_handlers(clean_loggers):
    logging.getLogger().addHandler(logging.NullHandler())
    logger = configure_modevo_logging(level=logging.WARNING)
    assert logger.handlers == []
    assert logger.level == logging.WARNING


def test_unknown_level(clean_loggers):
    with pytest.raises(ValueError):
        configure_modevo_logging(level="chatty")


def test_run_logs_start_and_termination(caplog):
    rng = np.random.default_rng(0)
    algorithm = build_differential_evolution(SphereProblem(2, rng), DEConfig.default(pop_size=6, max_generations=3), rng)

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        algorithm.optimize()

    messages = [record.getMessage() for record in caplog.records]
    assert any(msg.startswith("Starting DifferentialEvolution") for msg in messages)
    assert any(msg.startswith("generation 2:") for msg in messages)
    assert any(msg.startswith("Terminated after 3 generations") for msg in messages)
    assert all(record.name.startswith(LOGGER_NAME + ".") for record in caplog.records)

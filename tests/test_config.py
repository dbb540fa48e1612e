# File: tests/test_config.py
"""
Test configuration defaults and logging setup.
"""

import logging

import pytest

from beam_analysis import Beam, Material, SimplySupported
from beam_analysis.config import AnalysisConfig, CONFIG
from beam_analysis.logging_setup import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("beam_analysis")
    saved = list(logger.handlers)
    level = logger.level
    for h in saved:
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for h in saved:
        logger.addHandler(h)
    logger.setLevel(level)


def test_defaults():
    cfg = AnalysisConfig()
    assert cfg.n_steps == 100
    assert cfg.decimals == 2
    assert cfg.default_condition == "simply-supported"
    assert cfg.cors_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]


def test_analyzers_pick_up_global_config(monkeypatch):
    monkeypatch.setattr(CONFIG, "n_steps", 20)
    monkeypatch.setattr(CONFIG, "decimals", 1)
    analyzer = SimplySupported()
    curve = analyzer.shear_force(Beam(4.0, 0.0, Material("m", {"EI": 1.0})), 10.0)
    assert len(curve.xdata) == 21
    assert analyzer.decimals == 1


def test_setup_logging_is_idempotent(clean_logger, tmp_path):
    logger = setup_logging(level="DEBUG", log_dir=str(tmp_path))
    n_handlers = len(logger.handlers)
    assert n_handlers == 2
    assert logger.level == logging.DEBUG
    assert (tmp_path / CONFIG.log_name).exists()

    again = setup_logging(level="DEBUG", log_dir=str(tmp_path))
    assert again is logger
    assert len(again.handlers) == n_handlers


def test_setup_logging_console_only(clean_logger):
    logger = setup_logging(log_dir="")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)

"""
Shared fixtures for the dotcurve tests.

Provides editor sessions, sample point sets and the offscreen Qt platform.
"""
import logging
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dotcurve.config import EditorConfig, SamplingConfig
from dotcurve.core import EditorSession, prepare_sequence


# ── Sample control points ───────────────────────────────────────────────

UNSORTED_POINTS = [(30.0, 40.0), (10.0, 20.0), (50.0, 5.0)]
SURFACE_WIDTH = 200.0


@pytest.fixture
def prepared():
    return prepare_sequence(UNSORTED_POINTS, SURFACE_WIDTH)


@pytest.fixture
def session():
    return EditorSession()


@pytest.fixture
def small_session():
    config = EditorConfig(sampling=SamplingConfig(uniform_samples=20, hermite_steps=10, natural_steps=5))
    return EditorSession(config)


@pytest.fixture
def clean_dotcurve_logger():
    logger = logging.getLogger("dotcurve")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)

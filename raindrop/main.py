"""Entry point helpers — logging setup and session factory."""

from __future__ import annotations

import logging

import numpy as np
from dotenv import load_dotenv

from raindrop.config import settings
from raindrop.engine.config import SamplerConfig
from raindrop.session.state import AnnotationSession

load_dotenv()

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.raindrop_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=_LOG_FORMAT,
    )


def create_rng() -> np.random.Generator:
    """Random source for region sampling, seeded from settings when configured."""
    return np.random.default_rng(settings.random_seed)


def create_session() -> tuple[AnnotationSession, np.random.Generator]:
    """Empty session sized by settings, plus the generator to drive its region sampling."""
    session = AnnotationSession(sampler_config=SamplerConfig.from_settings(settings))
    return session, create_rng()

"""
Tracking Configuration

Settings come from environment variables (a local .env file is loaded
first):

- TRACKING_NUMBER_VERSION  version tag stamped on new numbers (default TP1)
- TRACKING_SEQUENCE_START  first value of the in-process sequence (default 1)
- TRACKING_LOG_LEVEL       logging level name (default INFO)
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from tracking.codec import TrackingNumberGenerator
from tracking.identifiers import VersionTag, parse_version_tag
from tracking.sequence import InMemorySequence, SequenceSource
from tracking.service import TrackingNumberService

load_dotenv()

DEFAULT_VERSION = "TP1"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_version_tag() -> VersionTag:
    """Configured version tag; raises InvalidVersionError for a bad value."""
    return parse_version_tag(os.getenv("TRACKING_NUMBER_VERSION", DEFAULT_VERSION))


def get_sequence_start() -> int:
    raw = os.getenv("TRACKING_SEQUENCE_START", "1")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TRACKING_SEQUENCE_START must be an integer, got {raw!r}") from None


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.getenv("TRACKING_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


def build_generator() -> TrackingNumberGenerator:
    return TrackingNumberGenerator(get_version_tag())


def build_service(sequence_source: Optional[SequenceSource] = None) -> TrackingNumberService:
    """
    Wire a TrackingNumberService from the environment.

    Args:
        sequence_source: Source of sequence values; defaults to an
            InMemorySequence starting at TRACKING_SEQUENCE_START

    Returns:
        TrackingNumberService
    """
    if sequence_source is None:
        sequence_source = InMemorySequence(start=get_sequence_start())
    return TrackingNumberService(build_generator(), sequence_source)

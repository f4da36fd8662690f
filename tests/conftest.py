#!/usr/bin/env python3
"""
Shared fixtures for nucgrep tests.
"""

import io

import pytest
from loguru import logger


TWO_RECORDS = ">h1\nACGT\n>h2\nTTTT\n"

WRAPPED = (
    ">seq1 first record\n"
    "CATG\n"
    "GA\n"
    "\n"
    ">seq2 second record\n"
    "TTTTTTTT\n"
    "TTTTATGA\n"
    ">seq3\n"
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks added during a test (the CLI adds its own)."""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def two_records():
    return io.StringIO(TWO_RECORDS)


@pytest.fixture
def wrapped_fasta(tmp_path):
    """FASTA file with wrapped sequence lines and an empty record."""
    path = tmp_path / "wrapped.fa"
    path.write_text(WRAPPED)
    return path

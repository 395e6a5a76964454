"""Shared fixtures."""

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def targets_file(tmp_path):
    """Write target names to a file, one per line."""

    def _write(names, name="targets.txt"):
        path = tmp_path / name
        path.write_text("\n".join(names) + "\n", encoding="utf-8")
        return path

    return _write

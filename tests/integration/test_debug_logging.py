"""Regression tests for debug code tracing across the batch stages.

When a code is traced, every stage that touches it must log a
``[DEBUG CODE: 'x']`` line tagged with its stage:

1. Pass 1 duplicate check
2. Conflict detection
3. Weight replay
4. Pass 2 resolution
"""

import io

import pytest
from conftest import change, create, delete, make_store
from loguru import logger

from rimeguard.resolution import check_batch_conflicts_with_weight
from rimeguard.utils.logging import setup_logger


@pytest.fixture
def log_capture():
    """Collect DEBUG output in a StringIO sink."""
    setup_logger(verbose=True, debug=True)

    # Add after setup_logger so it doesn't get removed
    capture = io.StringIO()
    handler_id = logger.add(capture, level="DEBUG", format="{message}")
    try:
        yield capture
    finally:
        logger.remove(handler_id)
        logger.remove()


def _run(items, debug_codes):
    store = make_store(("如果", "rjgl", 100), ("其他", "qita", 100))
    return check_batch_conflicts_with_weight(items, store, debug_codes=debug_codes)


def test_detector_and_weight_stages_logged(log_capture):
    """Detection and weight replay both log the traced code."""
    _run([create("1", "茹果", "rjgl")], {"rjgl"})

    log_text = log_capture.getvalue()
    assert "[DEBUG CODE: 'rjgl'] [Detector]" in log_text, (
        f"Expected detector trace for 'rjgl'. Captured messages:\n{log_text}"
    )
    assert "[DEBUG CODE: 'rjgl'] [Weight]" in log_text, (
        f"Expected weight trace for 'rjgl'. Captured messages:\n{log_text}"
    )


def test_pass_2_resolution_logged(log_capture):
    """Resolution by another item is traced in Pass 2."""
    _run([create("1", "茹果", "rjgl"), delete("2", "如果", "rjgl")], {"rjgl"})

    log_text = log_capture.getvalue()
    assert "[Pass 2]" in log_text and "resolved by Delete #2" in log_text, (
        f"Expected Pass 2 trace. Captured messages:\n{log_text}"
    )


def test_pass_2_rename_logged(log_capture):
    """A renamed occupant is traced in Pass 2."""
    _run([change("1", "如果", "茹果", "rjgl"), create("2", "如果", "rjgl")], {"rjgl"})

    assert "still duplicate" in log_capture.getvalue()


def test_pass_1_duplicate_logged(log_capture):
    """In-batch duplicates are traced in Pass 1."""
    _run([create("1", "新词", "rjgl"), create("2", "新词", "rjgl")], {"rjgl"})

    assert "[DEBUG CODE: 'rjgl'] [Pass 1]" in log_capture.getvalue()


def test_untraced_codes_are_silent(log_capture):
    """Only traced codes produce debug code lines."""
    _run([create("1", "其它", "qita")], {"rjgl"})

    assert "[DEBUG CODE: 'qita']" not in log_capture.getvalue()


def test_no_debug_codes_means_no_trace(log_capture):
    """Without debug codes nothing is traced."""
    _run([create("1", "茹果", "rjgl")], None)

    assert "[DEBUG CODE:" not in log_capture.getvalue()

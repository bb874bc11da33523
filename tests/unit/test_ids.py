"""Tests for record ID generation."""

import re

import pytest

from taskboard.core.ids import generate_id


@pytest.mark.unit
def test_generate_id_format():
    assert re.fullmatch(r"offer_\d{13}_[0-9a-z]{9}", generate_id("offer"))


@pytest.mark.unit
def test_generate_id_unique_within_same_millisecond(monkeypatch):
    """Test the random suffix keeps IDs distinct when the clock does not move."""
    monkeypatch.setattr("taskboard.core.ids.time.time_ns", lambda: 1_700_000_000_000_000_000)

    ids = {generate_id("task") for _ in range(200)}

    assert len(ids) == 200
    assert all(task_id.startswith("task_1700000000000_") for task_id in ids)

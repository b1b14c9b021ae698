"""Shared fixtures for fastentity tests."""

import pytest

import fastentity

SAMPLE = (
    "日 本語. jack was a golang developer from sydney, for someone. "
    "San Francisco, USA... Or so they say. Maybe PHP, or PDX."
)


@pytest.fixture
def sample():
    return SAMPLE


@pytest.fixture
def store():
    """Store with two groups created up front and one created lazily."""
    s = fastentity.Store("locations", "jobTitles")  # "skills" is created by add()
    s.add("locations", "San Francisco, USA")
    s.add("jobTitles", "golang developer")
    s.add("skills", "PHP", "本語", "PRC")
    return s

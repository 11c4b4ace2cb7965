"""
Test configuration and fixtures for icon set tests.
"""
import copy

import pytest

from iconset import IconSet


SAMPLE_DOCUMENT = {
    "prefix": "demo",
    "info": {
        "name": "Demo Icons",
        "author": "Jane Doe",
        "license": "MIT",
        "total": 99,
    },
    "width": 24,
    "height": 24,
    "icons": {
        "home": {"body": '<path d="M0 0h24v24H0z"/>'},
        "mdi-home": {"body": '<path d="M1 1h22v22H1z"/>'},
        "arrow": {"body": '<path d="M2 12h20"/>', "rotate": 0},
        "secret": {"body": '<circle r="4"/>', "hidden": True},
        "small": {"body": '<path d="M0 0h16v16z"/>', "width": 16, "height": 16},
        "home-outline": {"body": '<path d="M0 0h20v20z"/>'},
    },
    "aliases": {
        "house": {"parent": "home"},
        "arrow-down": {"parent": "arrow", "rotate": 1},
        "arrow-left": {"parent": "arrow-down", "rotate": 1},
        "arrow-flipped": {"parent": "arrow", "hFlip": True},
        "home": {"parent": "arrow"},
        "broken": {"parent": "missing"},
    },
    "chars": {
        "e001": "home",
        "e002": "house",
        "e003": "nothing",
    },
    "categories": {
        "Buildings": ["home", "house", "mdi-home", "secret"],
        "Arrows": ["arrow"],
        "Empty": ["house"],
    },
    "prefixes": {"mdi": "Material"},
    "suffixes": {"outline": "Outline", "": "Solid"},
}


@pytest.fixture
def sample_document():
    """Fixture providing a fresh copy of the sample icon set document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def icon_set(sample_document):
    """Fixture providing icon set loaded from the sample document."""
    return IconSet(sample_document)


@pytest.fixture
def simple_set():
    """Fixture providing icon set with one 24x24 icon and no aliases."""
    return IconSet({
        "prefix": "simple",
        "icons": {
            "base": {"body": '<path d="M0 0h24v24z"/>', "width": 24, "height": 24},
        },
    })

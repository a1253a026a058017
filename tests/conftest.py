"""Shared test fixtures."""

import random
from pathlib import Path

import numpy as np
import pytest

import blob_canvas

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]

SAMPLE_CONFIG = """\
[style]
    seedlist = [3, 14, 159]
    width = 400
    height = 300

[colors]
    bg = "#101010"
    c1 = "#FF69B4"
    c2 = "#FF1493"

[blob]
    edges = 7
    smoothness = 0.3
    fill = "solid"
    gradient_angle = 45
    stretch_x = 1.5

[canvas]
    n_blobs = 3
    blur = 4.0

[noise]
    opacity = 0.2
    size = 4
    intensity = 0.5

[scenes]
    single_blob = true
    blob_composition = false
"""


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def np_rng():
    return np.random.default_rng(1234)


@pytest.fixture
def square():
    return list(SQUARE)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    monkeypatch.delenv("GEN_SEED", raising=False)
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def scenes_dir():
    return Path(blob_canvas.__file__).resolve().parent / "scenes"

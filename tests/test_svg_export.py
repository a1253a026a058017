"""Tests for standalone blob and canvas SVG documents."""

import random

import numpy as np
import pytest

from blob_canvas.document import BlobConfig, CanvasDocument, FillType
from blob_canvas.svg_export import (
    NoiseOverlay,
    blob_drawing,
    canvas_drawing,
    gradient_vector,
)


def _blob(fill, seed=2):
    return BlobConfig(edges=6, smoothness=0.5, fill=fill).generate(random.Random(seed))


@pytest.mark.parametrize(
    "angle, start, end",
    [
        (0, ("0%", "50%"), ("100%", "50%")),
        (90, ("50%", "0%"), ("50%", "100%")),
        (180, ("100%", "50%"), ("0%", "50%")),
        (45, ("14.64%", "14.64%"), ("85.36%", "85.36%")),
    ],
)
def test_gradient_vector(angle, start, end):
    assert gradient_vector(angle) == (start, end)


def test_gradient_blob_document():
    blob = _blob(FillType.GRADIENT)
    xml = blob_drawing(blob).tostring()

    assert 'viewBox="0 0 300 300"' in xml
    assert "<linearGradient" in xml
    assert 'id="gradient"' in xml
    assert 'stop-color="#D3E1EB"' in xml
    assert 'stop-color="#FFFFFF"' in xml
    assert 'fill="url(#gradient)"' in xml
    assert "url(#gradient) none" not in xml
    assert f'd="{blob.path}"' in xml


def test_solid_blob_document():
    blob = _blob(FillType.SOLID)
    xml = blob_drawing(blob).tostring()

    assert "<linearGradient" not in xml
    assert 'fill="#D3E1EB"' in xml


def test_outline_blob_document():
    blob = _blob("outline")
    xml = blob_drawing(blob).tostring()

    assert 'fill="none"' in xml
    assert 'stroke="#D3E1EB"' in xml
    assert 'stroke-width="2"' in xml


def test_blob_without_path_has_no_path_element():
    xml = blob_drawing(BlobConfig()).tostring()
    assert "<path" not in xml


def test_blob_document_saves(tmp_path):
    out = tmp_path / "blob.svg"
    blob_drawing(_blob(FillType.SOLID), str(out)).save()
    assert out.read_text(encoding="utf-8").startswith("<?xml")


def _document():
    doc = CanvasDocument()
    doc.add(_blob(FillType.GRADIENT, seed=1), x=300, y=200)
    doc.add(_blob(FillType.SOLID, seed=2), x=700, y=400)
    doc.rotate(1)
    return doc


def test_canvas_layers_and_transforms():
    xml = canvas_drawing(_document(), background="#123456").tostring()

    assert 'viewBox="0 0 1000 600"' in xml
    assert 'fill="#123456"' in xml
    assert xml.count("<path") == 2
    assert 'id="blob-gradient-0"' in xml
    assert 'fill="url(#blob-gradient-0)"' in xml
    assert "translate(300 200) rotate(0) scale(1) translate(-150 -150)" in xml
    assert "translate(700 400) rotate(45) scale(1) translate(-150 -150)" in xml


def test_canvas_blur_filter():
    blurred = canvas_drawing(_document(), blur=8).tostring()
    sharp = canvas_drawing(_document(), blur=0).tostring()

    assert "<feGaussianBlur" in blurred
    assert 'filter="url(#blob-blur)"' in blurred
    assert "<feGaussianBlur" not in sharp


def test_canvas_noise_overlay():
    noise = NoiseOverlay(opacity=0.3, size=4, intensity=0.5)
    xml = canvas_drawing(
        _document(), noise=noise, rng=np.random.default_rng(0)
    ).tostring()

    assert "data:image/png;base64," in xml
    assert "mix-blend-mode:screen" in xml
    assert 'opacity="0.3"' in xml
    assert 'preserveAspectRatio="none"' in xml


def test_canvas_without_noise_or_with_zero_opacity():
    assert "<image" not in canvas_drawing(_document()).tostring()
    xml = canvas_drawing(_document(), noise=NoiseOverlay(opacity=0)).tostring()
    assert "<image" not in xml


def test_canvas_skips_empty_paths():
    doc = _document()
    doc.add(BlobConfig())
    assert canvas_drawing(doc).tostring().count("<path") == 2


def test_canvas_gradient_fill_has_no_fallback():
    xml = canvas_drawing(_document()).tostring()
    assert 'fill="url(#blob-gradient-0)"' in xml
    assert "url(#blob-gradient-0) none" not in xml


def test_noise_overlay_keeps_square_cells():
    doc = CanvasDocument(1000, 600)
    noise = NoiseOverlay(opacity=0.5, size=3)
    xml = canvas_drawing(doc, noise=noise, rng=np.random.default_rng(1)).tostring()

    # 333 x 200 samples magnified by 3; the 1px remainder column stays uncovered
    assert 'width="999"' in xml
    assert 'height="600"' in xml
    assert 'width="1000"' in xml

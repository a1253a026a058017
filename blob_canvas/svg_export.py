"""svgwrite documents for single blobs and full canvas compositions."""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import svgwrite

from blob_canvas.core.curves import format_number
from blob_canvas.core.noise_texture import generate_noise_texture, noise_data_uri
from blob_canvas.document import BlobConfig, CanvasDocument, FillType

BLOB_VIEWBOX = 300
OUTLINE_WIDTH = 2


@dataclass
class NoiseOverlay:
    opacity: float = 0.05
    size: int = 1
    intensity: float = 1.0


def gradient_vector(angle: float) -> Tuple[Tuple[str, str], Tuple[str, str]]:
    """Start/end of a linear gradient through the box center, in percent."""
    a = math.radians(angle)

    def pct(v: float) -> str:
        return f"{format_number(v, 2)}%"

    start = (pct(50 - math.cos(a) * 50), pct(50 - math.sin(a) * 50))
    end = (pct(50 + math.cos(a) * 50), pct(50 + math.sin(a) * 50))
    return start, end


def _paint(
    dwg: svgwrite.Drawing, blob: BlobConfig, gradient_id: str
) -> Dict[str, object]:
    fill = FillType.parse(blob.fill)
    if fill is FillType.GRADIENT:
        start, end = gradient_vector(blob.gradient_angle)
        grad = dwg.linearGradient(start=start, end=end, id=gradient_id)
        grad.add_stop_color(offset="0%", color=blob.color1)
        grad.add_stop_color(offset="100%", color=blob.color2)
        dwg.defs.add(grad)
        return {"fill": grad.get_funciri()}
    if fill is FillType.SOLID:
        return {"fill": blob.color1}
    return {"fill": "none", "stroke": blob.color1, "stroke_width": OUTLINE_WIDTH}


def blob_drawing(blob: BlobConfig, out_file: str = "blob.svg") -> svgwrite.Drawing:
    """Standalone document for one blob; path data is embedded verbatim."""
    dwg = svgwrite.Drawing(out_file, size=(BLOB_VIEWBOX, BLOB_VIEWBOX))
    dwg["viewBox"] = f"0 0 {BLOB_VIEWBOX} {BLOB_VIEWBOX}"
    if blob.path:
        dwg.add(dwg.path(d=blob.path, **_paint(dwg, blob, "gradient")))
    return dwg


def canvas_drawing(
    document: CanvasDocument,
    out_file: str = "canvas.svg",
    background: str = "#F9FAFB",
    blur: float = 0.0,
    noise: Optional[NoiseOverlay] = None,
    rng: Optional[np.random.Generator] = None,
) -> svgwrite.Drawing:
    """
    Background rect, blobs in document order, then the grain overlay.

    blur > 0 wraps the blobs in a Gaussian blur filter. The noise buffer is
    sampled at canvas size / noise.size and magnified back by whole cells
    with pixelated rendering, so a remainder strip stays uncovered. Blended
    with mix-blend-mode screen.
    """
    w, h = document.width, document.height
    dwg = svgwrite.Drawing(out_file, size=(w, h))
    dwg["viewBox"] = f"0 0 {w} {h}"
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=background))

    layer = dwg.g(id="blobs")
    if blur > 0:
        flt = dwg.filter(start=("-50%", "-50%"), size=("200%", "200%"), id="blob-blur")
        flt.feGaussianBlur(in_="SourceGraphic", stdDeviation=blur)
        dwg.defs.add(flt)
        layer["filter"] = flt.get_funciri()

    for index, placed in enumerate(document.blobs):
        if not placed.blob.path:
            continue
        paint = _paint(dwg, placed.blob, f"blob-gradient-{index}")
        layer.add(dwg.path(d=placed.blob.path, transform=placed.transform(), **paint))
    dwg.add(layer)

    if noise is not None and noise.opacity > 0:
        size = max(int(noise.size), 1)
        texture = generate_noise_texture(w // size, h // size, noise.intensity, rng)
        if texture.size:
            img = dwg.image(
                href=noise_data_uri(texture),
                insert=(0, 0),
                size=(texture.shape[1] * size, texture.shape[0] * size),
                opacity=noise.opacity,
                style="mix-blend-mode:screen;image-rendering:pixelated",
            )
            img.stretch()
            dwg.add(img)
    return dwg

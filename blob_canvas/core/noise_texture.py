"""Per-pixel grain texture, blended over the canvas as an overlay."""

import base64
import io
from typing import Optional

import numpy as np
from PIL import Image

MID_GRAY = 128
FULL_RANGE = 255


def generate_noise_texture(
    width: int,
    height: int,
    intensity: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Fresh (height, width, 4) uint8 RGBA buffer, rows first.

    Every pixel is an independent gray sample
        128 + (u - 0.5) * 255 * intensity,  u ~ U[0, 1)
    rounded half-to-even and clamped to 0..255, with alpha fixed at 255.
    intensity 0 => uniform mid gray. Nothing is cached between calls.
    """
    width = max(int(width), 0)
    height = max(int(height), 0)
    rng = rng or np.random.default_rng()

    values = MID_GRAY + (rng.random((height, width)) - 0.5) * FULL_RANGE * intensity
    gray = np.clip(np.rint(values), 0, FULL_RANGE).astype(np.uint8)

    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., 0] = gray
    rgba[..., 1] = gray
    rgba[..., 2] = gray
    rgba[..., 3] = FULL_RANGE
    return rgba


def noise_to_image(buffer: np.ndarray, size: int = 1) -> Image.Image:
    """Pillow image of the buffer, magnified `size` times without smoothing."""
    if buffer.size == 0:
        raise ValueError("noise buffer is empty")
    img = Image.fromarray(buffer)
    size = max(int(size), 1)
    if size > 1:
        img = img.resize(
            (img.width * size, img.height * size), Image.Resampling.NEAREST
        )
    return img


def noise_data_uri(buffer: np.ndarray) -> str:
    out = io.BytesIO()
    noise_to_image(buffer).save(out, format="PNG", optimize=True)
    return "data:image/png;base64," + base64.b64encode(out.getvalue()).decode("ascii")

"""Organic blob shapes, smooth closed paths and grain textures."""

from blob_canvas.core.curves import points_to_path
from blob_canvas.core.noise_texture import generate_noise_texture
from blob_canvas.core.polygon import generate_blob_points

__all__ = ["generate_blob_points", "points_to_path", "generate_noise_texture"]

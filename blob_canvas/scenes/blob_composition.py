"""Scatter several blobs over a canvas with background, blur and grain."""

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import numpy as np

from blob_canvas.document import BlobConfig, CanvasDocument, FillType
from blob_canvas.py_helper.toml_utils import (
    blob_config_from_toml,
    get_table,
    load_toml_config,
    noise_from_toml,
    resolve_seed,
    resolve_size,
)
from blob_canvas.scenes._common import scene_args
from blob_canvas.svg_export import NoiseOverlay, canvas_drawing


@dataclass
class CompositionConfig:
    width: int = 1000
    height: int = 600
    margin: int = 80
    seed: int = 7

    n_blobs: int = 6
    edges_min: int = 4
    edges_max: int = 12
    smoothness_min: float = 0.2
    smoothness_max: float = 0.8
    scale_min: float = 0.8
    scale_max: float = 2.4

    background: str = "#F9FAFB"
    blur: float = 12.0


def composition_from_toml(
    config: Dict, width: int, height: int, seed: int
) -> CompositionConfig:
    canvas = get_table(config, "canvas")
    base = CompositionConfig(width=width, height=height, seed=seed)
    base.background = str(get_table(config, "colors").get("bg", base.background))
    for key, value in canvas.items():
        if not hasattr(base, key):
            raise ValueError(f"Unknown key [canvas].{key} in config.toml")
        setattr(base, key, _coerce(key, value, type(getattr(base, key))))
    return base


def _coerce(key: str, value, kind: type):
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"[canvas].{key} must be a whole number, got {value}")
    return kind(value)


def build_document(cfg: CompositionConfig, template: BlobConfig) -> CanvasDocument:
    """Blobs vary edges/smoothness/placement; fill and colors come from template."""
    rng = random.Random(cfg.seed)
    doc = CanvasDocument(cfg.width, cfg.height)

    palette = [template.color1, template.color2]
    for _ in range(cfg.n_blobs):
        c1, c2 = rng.sample(palette, 2)
        blob = BlobConfig(
            edges=rng.randint(cfg.edges_min, cfg.edges_max),
            smoothness=rng.uniform(cfg.smoothness_min, cfg.smoothness_max),
            fill=FillType.parse(template.fill),
            color1=c1,
            color2=c2,
            gradient_angle=rng.uniform(0, 360),
            width=template.width,
            height=template.height,
            radius=template.radius,
        ).generate(rng)

        index = doc.add(
            blob,
            x=rng.uniform(cfg.margin, cfg.width - cfg.margin),
            y=rng.uniform(cfg.margin, cfg.height - cfg.margin),
        )
        doc.scale(index, rng.uniform(cfg.scale_min, cfg.scale_max))
        for _turn in range(rng.randint(0, 7)):
            doc.rotate(index)
    return doc


def generate_composition_svg(
    out_file: Path, cfg: CompositionConfig, template: BlobConfig, noise: NoiseOverlay
) -> CanvasDocument:
    doc = build_document(cfg, template)
    dwg = canvas_drawing(
        doc,
        str(out_file),
        background=cfg.background,
        blur=cfg.blur,
        noise=noise,
        rng=np.random.default_rng(cfg.seed),
    )
    dwg.save()
    return doc


if __name__ == "__main__":
    args = scene_args(__doc__)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    config = load_toml_config(args.config)
    width, height = resolve_size(
        config, CompositionConfig.width, CompositionConfig.height
    )
    cfg = composition_from_toml(config, width, height, resolve_seed(config))

    doc = generate_composition_svg(
        args.out, cfg, blob_config_from_toml(config), noise_from_toml(config)
    )
    print(f"Wrote {args.out} (seed={cfg.seed}, blobs={len(doc)})")

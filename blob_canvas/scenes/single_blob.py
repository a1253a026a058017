"""Render one blob from [blob]/[colors] as a standalone 300x300 SVG."""

import random
from pathlib import Path

from blob_canvas.document import BlobConfig
from blob_canvas.py_helper.toml_utils import (
    blob_config_from_toml,
    load_toml_config,
    resolve_seed,
)
from blob_canvas.scenes._common import scene_args
from blob_canvas.svg_export import blob_drawing


def generate_blob_svg(out_file: Path, cfg: BlobConfig, seed: int) -> BlobConfig:
    cfg.generate(random.Random(seed))
    blob_drawing(cfg, str(out_file)).save()
    return cfg


if __name__ == "__main__":
    args = scene_args(__doc__)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    config = load_toml_config(args.config)
    cfg = blob_config_from_toml(config)
    seed = resolve_seed(config)

    generate_blob_svg(args.out, cfg, seed)
    print(f"Wrote {args.out} (seed={seed}, edges={cfg.edges}, fill={cfg.fill.value})")

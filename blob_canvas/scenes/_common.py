"""Argument handling shared by every scene module."""

import argparse
from pathlib import Path

from blob_canvas.py_helper import variables

ROOT = Path(__file__).resolve().parents[1]


def scene_args(description: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        type=Path,
        default=ROOT / variables.CONFIG,
        help="config.toml to read.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=ROOT / variables.OUTPUT / variables.TMP_SVG,
        help="SVG file to write.",
    )
    return parser.parse_args()

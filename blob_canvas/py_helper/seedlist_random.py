"""Generate a random seedlist and store it in config.toml."""

import argparse
import random
from pathlib import Path

from blob_canvas.py_helper import variables
from blob_canvas.py_helper.toml_utils import load_toml_config, write_toml

ROOT = Path(__file__).resolve().parents[1]


def make_seedlist(
    count: int,
    min_value: int = 0,
    max_value: int = 9999,
    rng: random.Random | None = None,
) -> list[int]:
    if count <= 0:
        raise ValueError("count must be a positive integer")
    if min_value > max_value:
        raise ValueError("--min must be <= --max")
    rng = rng or random.Random()
    return [rng.randint(min_value, max_value) for _ in range(count)]


def store_seedlist(config_path: Path, seeds: list[int]) -> None:
    config = load_toml_config(config_path)

    style = config.get("style")
    if style is None:
        style = {}
    if not isinstance(style, dict):
        raise TypeError("[style] must be a table in config.toml")

    style["seedlist"] = seeds
    config["style"] = style
    write_toml(config, config_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a random seed list.")
    parser.add_argument("count", type=int, help="How many seeds to generate.")
    parser.add_argument(
        "--min",
        dest="min_value",
        type=int,
        default=0,
        help="Minimum random value (inclusive).",
    )
    parser.add_argument(
        "--max",
        dest="max_value",
        type=int,
        default=9999,
        help="Maximum random value (inclusive).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=ROOT / variables.CONFIG,
        help="config.toml to update.",
    )
    args = parser.parse_args()

    seeds = make_seedlist(args.count, args.min_value, args.max_value)
    store_seedlist(args.config, seeds)
    print(f"Wrote {len(seeds)} seeds to {args.config}")


if __name__ == "__main__":
    main()

"""Run enabled scenes for every seed and post-process the output SVGs."""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from blob_canvas.py_helper import variables
from blob_canvas.py_helper.scene_output import finish_scene_output
from blob_canvas.py_helper.toml_utils import (
    get_table,
    load_toml_config,
    resolve_seedlist,
)

logger = logging.getLogger(__name__)

ROOT: Path = Path(__file__).resolve().parent


def enabled_scenes(config: dict, scenes_dir: Path) -> list[str]:
    names = []
    for scene_name, enabled in get_table(config, "scenes").items():
        if not enabled:
            continue
        if not (scenes_dir / f"{scene_name}.py").exists():
            raise FileNotFoundError(scenes_dir / f"{scene_name}.py")
        names.append(scene_name)
    return names


def run_scene(
    scene_name: str, seed: int, config_path: Path, output_dir: Path, png: bool = True
) -> Path:
    """Render one scene for one seed; returns the final SVG or PNG path."""
    tmp_svg = output_dir / variables.TMP_SVG
    env = os.environ.copy()
    env["GEN_SEED"] = str(seed)

    logger.debug("Running scene %s with seed %d", scene_name, seed)
    subprocess.run(
        [
            sys.executable,
            "-m",
            f"blob_canvas.{variables.SCENES}.{scene_name}",
            "--config",
            str(config_path),
            "--out",
            str(tmp_svg),
        ],
        check=True,
        env=env,
    )
    return finish_scene_output(tmp_svg, scene_name, seed, png=png)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=ROOT / variables.CONFIG)
    parser.add_argument("--output", type=Path, default=ROOT / variables.OUTPUT)
    parser.add_argument(
        "--svg", action="store_true", help="Keep SVGs instead of rendering PNGs."
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args.output.mkdir(parents=True, exist_ok=True)
    config = load_toml_config(args.config)
    seeds = resolve_seedlist(config)
    scenes = enabled_scenes(config, ROOT / variables.SCENES)
    if not scenes:
        logger.warning("No scenes enabled in [scenes] of %s", args.config)

    for scene_name in scenes:
        for seed in seeds:
            path = run_scene(
                scene_name, seed, args.config, args.output, png=not args.svg
            )
            logger.info("Wrote %s", path)


if __name__ == "__main__":
    main()

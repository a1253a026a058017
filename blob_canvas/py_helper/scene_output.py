"""Turn a scene's temporary SVG into the named per-seed output file."""

import os
import sys
from pathlib import Path

HOMEBREW_LIB_DIRS = ("/opt/homebrew/lib", "/usr/local/lib")


class SceneOutputError(FileNotFoundError):
    """A scene module or the SVG a scene should have written is missing."""


def output_name(scene_name: str, seed: int, suffix: str) -> str:
    if not scene_name:
        raise SceneOutputError("scene name is empty")
    return f"{scene_name}_{seed}{suffix}"


def finish_scene_output(
    tmp_svg: Path, scene_name: str, seed: int, png: bool = True
) -> Path:
    """
    single_blob + seed 42 => output/single_blob_42.svg (or .png).
    The temporary SVG is consumed either way.
    """
    if not tmp_svg.is_file():
        raise SceneOutputError(f"{scene_name} wrote no SVG to {tmp_svg}")

    if not png:
        return tmp_svg.replace(tmp_svg.with_name(output_name(scene_name, seed, ".svg")))

    target = tmp_svg.with_name(output_name(scene_name, seed, ".png"))
    rasterize_svg(tmp_svg, target)
    tmp_svg.unlink()
    return target


def rasterize_svg(svg: Path, target: Path, dpi: int = 96) -> Path:
    if sys.platform == "darwin" and not os.environ.get("DYLD_FALLBACK_LIBRARY_PATH"):
        # cairosvg finds libcairo through this only if set before import
        found = [d for d in HOMEBREW_LIB_DIRS if Path(d).is_dir()]
        if found:
            os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = ":".join(found)

    import cairosvg

    cairosvg.svg2png(url=str(svg), write_to=str(target), dpi=dpi)
    return target


def list_scene_modules(directory: Path) -> list[str]:
    """Runnable scene names in directory; `_private` modules are skipped."""
    if not directory.is_dir():
        raise SceneOutputError(f"no scenes directory at {directory}")

    return sorted(
        path.stem
        for path in directory.glob("*.py")
        if path.is_file() and not path.name.startswith("_")
    )

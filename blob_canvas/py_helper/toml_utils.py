"""Reading and writing config.toml, and turning its tables into configs."""

import os
import tomllib
from pathlib import Path
from typing import Dict, Optional

from blob_canvas.document import BlobConfig, FillType
from blob_canvas.svg_export import NoiseOverlay


def load_toml_config(path: Path) -> Dict:
    with open(path, "rb") as f:
        return tomllib.load(f)


def get_table(config: Dict, name: str) -> Dict:
    table = config.get(name)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise TypeError(f"[{name}] must be a table in config.toml")
    return table


def resolve_seed(config: Dict) -> int:
    env_seed = os.getenv("GEN_SEED")
    if env_seed:
        return int(env_seed)
    style = get_table(config, "style")
    if style.get("seed") is not None:
        return int(style["seed"])
    seed_list = style.get("seedlist")
    if isinstance(seed_list, list) and seed_list:
        return int(seed_list[0])
    raise ValueError("Missing [style].seed or [style].seedlist in config.toml")


def resolve_seedlist(config: Dict) -> list[int]:
    seed_list = get_table(config, "style").get("seedlist")
    if seed_list is None:
        raise ValueError("Missing [style].seedlist in config.toml")
    if not isinstance(seed_list, list) or not seed_list:
        raise ValueError("[style].seedlist must be a non-empty list in config.toml")
    return [int(value) for value in seed_list]


def resolve_size(config: Dict, width: int, height: int) -> tuple[int, int]:
    style = get_table(config, "style")
    return int(style.get("width", width)), int(style.get("height", height))


def blob_config_from_toml(
    config: Dict, fallback: Optional[BlobConfig] = None
) -> BlobConfig:
    """[blob] parameters plus [colors].c1/c2; missing keys keep fallback values."""
    cfg = fallback or BlobConfig()
    blob = get_table(config, "blob")
    colors = get_table(config, "colors")

    edges = int(blob.get("edges", cfg.edges))
    if edges < 3:
        raise ValueError(f"[blob].edges must be >= 3, got {edges}")

    return BlobConfig(
        edges=edges,
        smoothness=float(blob.get("smoothness", cfg.smoothness)),
        fill=FillType.parse(blob.get("fill", cfg.fill)),
        color1=str(colors.get("c1", cfg.color1)),
        color2=str(colors.get("c2", cfg.color2)),
        gradient_angle=float(blob.get("gradient_angle", cfg.gradient_angle)),
        width=float(blob.get("stretch_x", cfg.width)),
        height=float(blob.get("stretch_y", cfg.height)),
        radius=float(blob.get("radius", cfg.radius)),
    )


def noise_from_toml(config: Dict) -> NoiseOverlay:
    noise = get_table(config, "noise")
    base = NoiseOverlay()
    return NoiseOverlay(
        opacity=float(noise.get("opacity", base.opacity)),
        size=int(noise.get("size", base.size)),
        intensity=float(noise.get("intensity", base.intensity)),
    )


# -------------------------
# Writing
# -------------------------


def format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    raise TypeError(f"Unsupported TOML value: {type(value).__name__}")


def write_toml(data: Dict, path: Path) -> None:
    lines: list[str] = []

    root_items = [(k, v) for k, v in data.items() if not isinstance(v, dict)]
    for key, value in root_items:
        lines.append(f"{key} = {format_value(value)}")
    if root_items:
        lines.append("")

    section_order = [k for k, v in data.items() if isinstance(v, dict)]
    for idx, section in enumerate(section_order):
        table = data[section]
        lines.append(f"[{section}]")
        for key in sorted(table.keys()):
            lines.append(f"    {key} = {format_value(table[key])}")
        if idx != len(section_order) - 1:
            lines.append("")
            lines.append("")

    path.write_text("\n".join(lines).rstrip() + "\n", encoding="utf-8")

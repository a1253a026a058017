"""Sync [scenes] entries in config.toml with the modules in scenes/."""

from pathlib import Path

from blob_canvas.py_helper import variables
from blob_canvas.py_helper.scene_output import list_scene_modules
from blob_canvas.py_helper.toml_utils import load_toml_config, write_toml

ROOT = Path(__file__).resolve().parents[1]


def sync_scenes(config_path: Path, scenes_dir: Path) -> dict:
    """New scenes are added disabled, scenes without a module are dropped."""
    scenes = list_scene_modules(scenes_dir)
    data = load_toml_config(config_path)

    table = data.get("scenes")
    if table is None:
        table = {}
    if not isinstance(table, dict):
        raise TypeError("[scenes] must be a table in config.toml")

    for name in scenes:
        table.setdefault(name, False)

    for key in list(table.keys()):
        if key not in scenes:
            del table[key]

    data["scenes"] = table
    write_toml(data, config_path)
    return table


def main() -> None:
    table = sync_scenes(ROOT / variables.CONFIG, ROOT / variables.SCENES)
    enabled = sorted(name for name, on in table.items() if on)
    print(f"Synced {len(table)} scenes ({len(enabled)} enabled: {', '.join(enabled)})")


if __name__ == "__main__":
    main()

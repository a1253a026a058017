"""File and directory names, relative to the blob_canvas package root."""

CONFIG = "config.toml"
OUTPUT = "output"
SCENES = "scenes"
TMP_SVG = "tmp.svg"

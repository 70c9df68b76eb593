"""Helpers for locating bundled data files."""

from __future__ import annotations

from pathlib import Path

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "assets"
_REPO_ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"

SAMPLE_PGN_NAME = "sample_games.pgn"


def assets_dir() -> Path:
    """Return the root directory for bundled assets."""
    if _PACKAGE_ASSETS_DIR.is_dir():
        return _PACKAGE_ASSETS_DIR
    return _REPO_ASSETS_DIR


def asset_path(*parts: str) -> Path:
    """Build an absolute path inside the assets directory."""
    return assets_dir().joinpath(*parts)


def load_sample_pgn() -> str:
    """Text of the bundled sample game collection."""
    return asset_path(SAMPLE_PGN_NAME).read_text(encoding="utf-8")

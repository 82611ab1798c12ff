import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (playground, app)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from playground.settings import settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every file the playground touches into tmp_path."""
    monkeypatch.setattr(settings, "path", str(tmp_path / "settings.json"))
    monkeypatch.setattr(settings, "_storage_path", str(tmp_path / "storage.log"))
    monkeypatch.setattr(settings, "_error_log_path", str(tmp_path / "errors.log"))
    monkeypatch.setattr(settings, "_snapshot_path", str(tmp_path / "open_closed.png"))
    return settings

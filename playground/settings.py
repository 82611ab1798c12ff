import json
import os

from playground.constants import (
    BACKGROUND_COLOR,
    CANVAS_SIZE,
    DEFAULT_ERROR_LOG_PATH,
    DEFAULT_SNAPSHOT_PATH,
    DEFAULT_STORAGE_PATH,
    SETTINGS_FILE,
    SHAPE_COLOR,
)
from playground.logger import get_logger

log = get_logger("settings")


def _clamp_color(value, fallback):
    try:
        r, g, b = (max(0, min(255, int(c))) for c in value)
    except (TypeError, ValueError):
        return tuple(fallback)
    return (r, g, b)


class Settings:
    """JSON-backed settings for the playground.

    Nothing is written until a value changes (or `flush` is called on a
    dirty instance); a missing file simply means defaults.
    """

    def __init__(self, path: str = SETTINGS_FILE, autoload: bool = True):
        self.path = path
        self._storage_path = DEFAULT_STORAGE_PATH
        self._error_log_path = DEFAULT_ERROR_LOG_PATH
        self._snapshot_path = DEFAULT_SNAPSHOT_PATH
        self._canvas_size = tuple(CANVAS_SIZE)
        self._background_color = tuple(BACKGROUND_COLOR)
        self._shape_color = tuple(SHAPE_COLOR)
        self._dirty = False
        if autoload:
            self.load_settings()

    # Paths ---------------------------------------------------------------
    @property
    def storage_path(self) -> str:
        return self._storage_path

    @storage_path.setter
    def storage_path(self, value: str) -> None:
        self._set("_storage_path", str(value))

    @property
    def error_log_path(self) -> str:
        return self._error_log_path

    @error_log_path.setter
    def error_log_path(self, value: str) -> None:
        self._set("_error_log_path", str(value))

    @property
    def snapshot_path(self) -> str:
        return self._snapshot_path

    @snapshot_path.setter
    def snapshot_path(self, value: str) -> None:
        self._set("_snapshot_path", str(value))

    # Drawing -------------------------------------------------------------
    @property
    def canvas_size(self) -> tuple:
        return self._canvas_size

    @canvas_size.setter
    def canvas_size(self, value) -> None:
        w, h = value
        self._set("_canvas_size", (max(1, int(w)), max(1, int(h))))

    @property
    def background_color(self) -> tuple:
        return self._background_color

    @background_color.setter
    def background_color(self, value) -> None:
        self._set("_background_color", _clamp_color(value, self._background_color))

    @property
    def shape_color(self) -> tuple:
        return self._shape_color

    @shape_color.setter
    def shape_color(self, value) -> None:
        self._set("_shape_color", _clamp_color(value, self._shape_color))

    def _set(self, attr: str, new_val) -> None:
        if new_val != getattr(self, attr):
            setattr(self, attr, new_val)
            self._dirty = True
            self.flush()

    @property
    def dirty(self) -> bool:
        return self._dirty

    # Persistence ---------------------------------------------------------
    def load_settings(self):
        """Load settings from the JSON file, keeping defaults for missing keys."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._storage_path = str(data.get("storage_path", self._storage_path))
            self._error_log_path = str(data.get("error_log_path", self._error_log_path))
            self._snapshot_path = str(data.get("snapshot_path", self._snapshot_path))
            size = data.get("canvas_size", self._canvas_size)
            self._canvas_size = (max(1, int(size[0])), max(1, int(size[1])))
            self._background_color = _clamp_color(data.get("background_color"), self._background_color)
            self._shape_color = _clamp_color(data.get("shape_color"), self._shape_color)
        except (json.JSONDecodeError, OSError, TypeError, ValueError, IndexError, AttributeError) as e:
            log.warn("Error loading settings; regenerating", e)
            self._dirty = True
            self.flush()

    def to_dict(self) -> dict:
        return {
            "storage_path": self._storage_path,
            "error_log_path": self._error_log_path,
            "snapshot_path": self._snapshot_path,
            "canvas_size": list(self._canvas_size),
            "background_color": list(self._background_color),
            "shape_color": list(self._shape_color),
        }

    def flush(self):
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=4)
            self._dirty = False
            log.debug("Settings flushed")
        except OSError as e:
            log.error("Error saving settings", e)


settings = Settings()

"""The viewer: a scene with one model, a light and keyboard rotation, loaded from files or drops."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence
from urllib.parse import urlparse
from urllib.request import url2pathname

from sceneview.controllers import WASDRotateController
from sceneview.entity import Entity
from sceneview.light import PointLightEntity
from sceneview.logger import DEFAULT_LOG_FILE, Logger
from sceneview.mesh import Color, MeshEntity

SUPPORTED_FORMATS = ("obj", "fbx", "dae", "gltf", "glb", "stl", "3ds", "ply")
DEFAULT_MODEL = "Qt3DModel/FinalBaseMesh.obj"
OPEN_FILE_FILTER = (
    "3D Model Files (*.obj *.fbx *.dae *.gltf *.glb *.stl *.3ds *.ply);;All Files (*)"
)


class ModelLoadError(Exception):
    """A model file could not be loaded; ``title`` names the kind of failure."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title


@dataclass(frozen=True)
class StatusMessage:
    """A transient status-bar message shown for ``timeout_ms`` milliseconds."""

    text: str
    timeout_ms: int = 0


def _suffix(path: str | os.PathLike[str]) -> str:
    name = Path(path).name
    _, dot, suffix = name.rpartition(".")
    return suffix if dot else ""


def is_supported_model_file(path: str | os.PathLike[str]) -> bool:
    """Return whether the file extension names a supported 3D model format."""
    return _suffix(path).lower() in SUPPORTED_FORMATS


def _local_path(url: str) -> str | None:
    """Return the local file path of a ``file:`` URL, or None for any other URL."""
    parsed = urlparse(url)
    if parsed.scheme != "file" or parsed.netloc not in ("", "localhost"):
        return None
    return url2pathname(parsed.path)


class Viewer:
    """Owns the scene and handles opening, dragging and dropping model files."""

    def __init__(
        self,
        screen_size: tuple[int, int] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = Logger.instance() if logger is None else logger
        self.status: StatusMessage | None = None
        self.clear_color = Color.WHITE

        self.root_entity = Entity()
        self.mesh_entity: MeshEntity | None = MeshEntity(self.root_entity)
        self.mesh_entity.source = DEFAULT_MODEL
        self.point_light_entity = PointLightEntity(self.root_entity)

        self.rotate_controller = WASDRotateController(parent=self.root_entity)
        self.rotate_controller.bind_entity(self.mesh_entity)

        self.window_size: tuple[int, int] | None = None
        self.window_position: tuple[int, int] | None = None
        if screen_size is not None:
            screen_width, screen_height = screen_size
            width, height = screen_width // 2, screen_height // 2
            self.window_size = (width, height)
            self.window_position = ((screen_width - width) // 2, (screen_height - height) // 2)
            self._logger.info(f"Window size set to {width}x{height}, centered on screen")

        self._logger.info("Application initialized successfully")

    def _show(self, text: str, timeout_ms: int) -> None:
        self.status = StatusMessage(text, timeout_ms)

    def load_model(self, path: str | os.PathLike[str]) -> None:
        """Show the model at ``path``; raises ModelLoadError if it cannot be used."""
        file_path = os.fspath(path)
        self._logger.debug(f"Attempting to load model: {file_path}")
        if not os.path.exists(file_path):
            raise ModelLoadError("File Error", f"File does not exist: {file_path}")
        if not os.access(file_path, os.R_OK):
            raise ModelLoadError("File Error", f"File is not readable: {file_path}")
        if not is_supported_model_file(file_path):
            raise ModelLoadError(
                "Format Error",
                f"Unsupported file format: {_suffix(file_path)}\n"
                f"Supported formats: {', '.join(SUPPORTED_FORMATS)}",
            )

        if self.mesh_entity is None:
            self.mesh_entity = MeshEntity(self.root_entity)
            self._logger.debug("Created new mesh entity")
        else:
            self._logger.debug("Updated existing model source URL")
        self.mesh_entity.source = file_path

        self._show(f"Model loaded: {Path(file_path).name}", 5000)
        self._logger.info(f"Model loaded: {file_path}")

    def drag_enter(self, urls: Sequence[str]) -> bool:
        """Return whether a drag carrying ``urls`` would be accepted."""
        if not urls:
            self._logger.debug("Reject drag: No URL data")
            self._show("Please drop files", 3000)
            return False
        file_path = _local_path(urls[0])
        if file_path is None:
            self._logger.debug("Reject drag: Not a local file")
            self._show("Please drop local files", 3000)
            return False
        if not is_supported_model_file(file_path):
            self._logger.debug("Reject drag: Unsupported file type")
            self._show("Unsupported file type", 3000)
            return False
        self._logger.debug("Accept drag: File type supported")
        self._show(f"Ready to drop: {Path(file_path).name}", 3000)
        return True

    def drop(self, urls: Sequence[str]) -> bool:
        """Load the first dropped file; return whether the drop was accepted."""
        if not urls:
            self._logger.debug("Drop data does not contain URLs")
            self._show("Please drop files", 3000)
            return False
        file_path = _local_path(urls[0])
        if file_path is None:
            self._logger.debug("Not a local file")
            self._show("Please drop local files", 3000)
            return False
        try:
            self.load_model(file_path)
        except ModelLoadError as error:
            self._logger.warning(f"{error.title}: {error}")
            self._show(f"Failed to load model: {Path(file_path).name}", 5000)
            return False
        self._logger.debug("Model loaded successfully")
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Set up logging, build the viewer and load any models named on the command line."""
    parser = argparse.ArgumentParser(prog="sceneview", description="View 3D model files.")
    parser.add_argument("models", nargs="*", help="model files to load")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="file to append log lines to")
    args = parser.parse_args(argv)

    logger = Logger.instance()
    logger.set_log_to_file(True, args.log_file)
    try:
        viewer = Viewer(logger=logger)
        logger.debug("Application started")
        for model in args.models:
            try:
                viewer.load_model(model)
            except ModelLoadError as error:
                logger.critical(f"{error.title}: {error}")
                return 1
        return 0
    finally:
        logger.close()
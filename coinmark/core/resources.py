"""Resolve bundled reference resources (JSON files shipped with the package)."""
from pathlib import Path

from coinmark.config import RESOURCES_DIR


class ResourceError(Exception):
    """Base class for failures reading a bundled resource."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class ResourceNotFoundError(ResourceError):
    pass


class ResourceUnreadableError(ResourceError):
    pass


def resource_path(name: str, resources_dir: Path = RESOURCES_DIR) -> Path:
    return Path(resources_dir) / f"{name}.json"


def read_resource(name: str, resources_dir: Path = RESOURCES_DIR) -> bytes:
    """Return raw bytes of resource name; raises ResourceError subclasses."""
    p = resource_path(name, resources_dir)
    if not p.is_file():
        raise ResourceNotFoundError(name, f"{p.name} not found in {p.parent}")
    try:
        return p.read_bytes()
    except OSError as e:
        raise ResourceUnreadableError(name, f"failed to read {p}: {e}") from e

from pathlib import Path
from typing import Optional, Union
import os

from fastapi import Request

from installed_versions.data.registry import PackageRegistry
from installed_versions.storage.file_sources import source_for_path

DATA_FILE_ENV_VAR = "INSTALLED_VERSIONS_DATA_FILE"
_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DATA_FILE = _PACKAGE_ROOT / "fixtures" / "installed.json"


def get_data_file(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the data source location.

    Priority:
    1. Explicit path argument
    2. Environment variable INSTALLED_VERSIONS_DATA_FILE
    3. The fixture bundled with the package
    """
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(DATA_FILE_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_DATA_FILE


def create_registry(path: Optional[Union[str, Path]] = None) -> PackageRegistry:
    return PackageRegistry(source_for_path(get_data_file(path)))


def get_registry(request: Request) -> PackageRegistry:
    """FastAPI dependency returning the registry created at application startup."""
    return request.app.state.registry

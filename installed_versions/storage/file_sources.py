import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from pydantic import ValidationError

from installed_versions.domain.models import Dataset
from installed_versions.exceptions import LoadError
from installed_versions.storage.data_source import DataSource

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _validate_dataset(raw: Any, origin: str) -> Dataset:
    if not isinstance(raw, Mapping):
        raise LoadError(f"{origin}: expected a mapping at the top level, got {type(raw).__name__}")
    if "versions" not in raw:
        raise LoadError(f"{origin}: missing required 'versions' mapping")
    try:
        return Dataset.model_validate(dict(raw))
    except ValidationError as e:
        raise LoadError(f"{origin}: malformed dataset: {e}") from e


class InMemorySource(DataSource):
    """
    Source backed by a mapping already held in memory.

    Useful for building synthetic datasets programmatically.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def load(self) -> Dataset:
        return _validate_dataset(self._data, self.describe())

    def describe(self) -> str:
        return "<in-memory>"


class FileSource(DataSource):
    """
    Base class for sources read from a single file on disk.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path)

    def load(self) -> Dataset:
        if not self._path.is_file():
            raise LoadError(f"Data source {self._path} does not exist")
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Failed to read data source {self._path}: {e}") from e

        raw = self._parse(content)
        return _validate_dataset(raw, str(self._path))

    def _parse(self, content: str) -> Any:
        raise NotImplementedError


class JsonFileSource(FileSource):
    def _parse(self, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {self._path}: {e}") from e


class YamlFileSource(FileSource):
    def _parse(self, content: str) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise LoadError(f"Invalid YAML in {self._path}: {e}") from e


def source_for_path(path: Union[str, Path]) -> FileSource:
    """
    Pick a file source by extension: YAML for .yaml/.yml, JSON otherwise.
    """
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        logger.debug(f"Using YAML source for {path}")
        return YamlFileSource(path)
    logger.debug(f"Using JSON source for {path}")
    return JsonFileSource(path)

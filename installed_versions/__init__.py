"""
Synthetic installed-package metadata registry.

A PackageRegistry answers version, package-list, raw-data and root-package
queries over a dataset loaded once from a JSON, YAML or in-memory source.
"""

from installed_versions.data.registry import PackageRegistry
from installed_versions.exceptions import (
    EmptyDatasetError,
    LoadError,
    MissingRootError,
    PackageNotFoundError,
    RegistryError,
)
from installed_versions.storage.file_sources import (
    InMemorySource,
    JsonFileSource,
    YamlFileSource,
    source_for_path,
)

__all__ = [
    "PackageRegistry",
    "RegistryError",
    "LoadError",
    "EmptyDatasetError",
    "PackageNotFoundError",
    "MissingRootError",
    "InMemorySource",
    "JsonFileSource",
    "YamlFileSource",
    "source_for_path",
]

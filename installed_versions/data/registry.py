from __future__ import annotations

import logging
import threading
from typing import Iterator, List, Optional, Tuple

from installed_versions.domain.models import Dataset, DatasetCollection, PackageInfo, RootPackage
from installed_versions.domain.version_utils import strip_version_tag
from installed_versions.exceptions import (
    EmptyDatasetError,
    LoadError,
    MissingRootError,
    PackageNotFoundError,
)
from installed_versions.storage.data_source import DataSource

logger = logging.getLogger(__name__)


class PackageRegistry:
    """
    Read-only view over the installed packages described by a data source.

    The source is read on the first query and cached for the lifetime of the
    instance. A failed load leaves the cache empty, so the next query tries
    the source again.
    """

    def __init__(self, source: DataSource):
        self._source = source
        self._datasets: Optional[DatasetCollection] = None
        self._load_lock = threading.Lock()

    @property
    def source(self) -> DataSource:
        return self._source

    @property
    def loaded(self) -> bool:
        return self._datasets is not None

    def get_all_raw_data(self) -> DatasetCollection:
        """
        Return every loaded dataset, loading the source on first use.
        """
        datasets = self._datasets
        if datasets is not None:
            logger.debug("Serving cached installed-package data")
            return datasets

        with self._load_lock:
            # Another thread may have finished loading while we waited.
            if self._datasets is None:
                logger.info(f"Loading installed-package data from {self._source.describe()}")
                try:
                    dataset = self._source.load()
                except LoadError:
                    logger.error(f"Failed to load installed-package data from {self._source.describe()}")
                    raise
                # Real installs may carry several manifests; this source yields one.
                self._datasets = (dataset,)
                logger.info(f"Loaded {len(dataset.versions)} installed packages")
            return self._datasets

    def get_version(self, package_name: str) -> str:
        return self._get_package(package_name).version

    def get_pretty_version(self, package_name: str) -> str:
        return self._get_package(package_name).pretty_version

    def is_installed(self, package_name: str) -> bool:
        return package_name in self._first_dataset().versions

    def get_installed_packages(self) -> List[str]:
        """
        Names of all installed packages, in the order the source lists them.
        """
        return list(self._first_dataset().versions.keys())

    def get_root_package(self) -> RootPackage:
        root = self._first_dataset().root
        if root is None:
            raise MissingRootError("Dataset has no root package")
        return root

    def show(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (package name, display version) pairs in dataset order.

        The display version is the pretty version with one leading tag
        character removed.
        """
        for name, info in self._first_dataset().versions.items():
            yield name, strip_version_tag(info.pretty_version)

    def _first_dataset(self) -> Dataset:
        datasets = self.get_all_raw_data()
        if not datasets:
            raise EmptyDatasetError("No installed-package datasets were loaded")
        return datasets[0]

    def _get_package(self, package_name: str) -> PackageInfo:
        if not package_name:
            raise ValueError("package_name must be a non-empty string")
        info = self._first_dataset().versions.get(package_name)
        if info is None:
            raise PackageNotFoundError(package_name)
        return info

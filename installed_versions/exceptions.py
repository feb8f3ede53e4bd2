"""
Installed-versions exception hierarchy.

RegistryError (base, Exception)
├── LoadError(RegistryError)                         ← source missing/unreadable/malformed
├── EmptyDatasetError(RegistryError)                 ← load produced no datasets
├── PackageNotFoundError(RegistryError, LookupError) ← unknown package name
└── MissingRootError(RegistryError, LookupError)     ← dataset has no root record

The lookup errors multi-inherit from LookupError so callers can treat them
like any other failed lookup.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base exception for all registry errors."""


class LoadError(RegistryError):
    """The data source is missing, unreadable, or not shaped like a dataset."""


class EmptyDatasetError(RegistryError):
    """Loading succeeded but produced zero datasets."""


class PackageNotFoundError(RegistryError, LookupError):
    """A queried package is not present in the dataset."""

    def __init__(self, package_name: str):
        super().__init__(f"Package {package_name} not found")
        self.package_name = package_name


class MissingRootError(RegistryError, LookupError):
    """The dataset carries no root package record."""

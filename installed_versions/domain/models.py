"""
Pydantic models for installed-package metadata.

This module defines the records the registry loads from its data source:
- Per-package install records (PackageInfo)
- The record describing the project itself (RootPackage)
- One manifest's worth of both (Dataset)

Only the fields the registry reads are declared, and they are validated
strictly. Everything else the source carries passes through untouched as
extra fields, so `raw()` returns each record exactly as it was loaded.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer, field_validator


class RawRecord(BaseModel):
    """
    Frozen record that keeps unknown fields verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    def raw(self) -> Dict[str, Any]:
        """Return the record as it appeared in the source, without added defaults."""
        declared = type(self).model_fields
        return {
            key: value
            for key, value in self.model_dump().items()
            if key not in declared or key in self.model_fields_set
        }


# ---------------------------------------------------------------------------
# Package Records
# ---------------------------------------------------------------------------


class PackageInfo(RawRecord):
    """
    Install record for a single dependency.

    Only `version` and `pretty_version` are interpreted by the registry.
    """

    version: StrictStr = Field(
        description="Normalized version string (opaque to the registry).",
    )
    pretty_version: StrictStr = Field(
        description="Human-facing version string, possibly prefixed with a tag character such as 'v'.",
    )


class RootPackage(RawRecord):
    """
    Record describing the project being inspected.

    A synthetic manifest's root often carries nothing but a name.
    """

    name: Optional[StrictStr] = None


# ---------------------------------------------------------------------------
# Datasets
# ---------------------------------------------------------------------------


class Dataset(RawRecord):
    """
    One manifest's worth of installed packages plus its root package.

    `versions` keeps the insertion order of the source document and is
    exposed as a read-only mapping.
    """

    versions: Mapping[str, PackageInfo] = Field(
        description="Installed packages keyed by package name.",
    )
    root: Optional[RootPackage] = Field(
        default=None,
        description="The project itself; absent in some synthetic manifests.",
    )

    @field_validator("versions", mode="after")
    @classmethod
    def _freeze_versions(cls, value: Mapping[str, PackageInfo]) -> Mapping[str, PackageInfo]:
        return MappingProxyType(dict(value))

    @field_serializer("versions", mode="wrap")
    def _dump_versions(self, value: Mapping[str, PackageInfo], handler):
        return handler(dict(value))

    def raw(self) -> Dict[str, Any]:
        data = super().raw()
        data["versions"] = {name: info.raw() for name, info in self.versions.items()}
        if self.root is not None:
            data["root"] = self.root.raw()
        return data


# Ordered collection of datasets. Only index 0 is read today.
DatasetCollection = Tuple[Dataset, ...]

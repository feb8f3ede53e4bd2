from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from installed_versions.core.dependencies import get_registry
from installed_versions.data.registry import PackageRegistry
from installed_versions.exceptions import (
    EmptyDatasetError,
    LoadError,
    MissingRootError,
    PackageNotFoundError,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _unavailable(e: Exception) -> HTTPException:
    logger.error(f"Installed-package data unavailable: {e}")
    return HTTPException(status_code=500, detail=str(e))


# ---------------------------------------------------------------------------
# 1. GET /packages
# ---------------------------------------------------------------------------

@router.get("/packages")
async def list_packages(registry: PackageRegistry = Depends(get_registry)) -> dict:
    """
    Names of all installed packages, in dataset order.
    """
    try:
        return {"Data": registry.get_installed_packages()}
    except (LoadError, EmptyDatasetError) as e:
        raise _unavailable(e)


# ---------------------------------------------------------------------------
# 2. GET /packages/{PackageName}
# ---------------------------------------------------------------------------

# Package names contain a vendor separator ("vendor/name"), hence the path converter.
@router.get("/packages/{package_name:path}")
async def get_package(package_name: str, registry: PackageRegistry = Depends(get_registry)) -> dict:
    if not package_name:
        raise HTTPException(status_code=404, detail="Package not found")
    try:
        return {
            "Data": {
                "PackageName": package_name,
                "Version": registry.get_version(package_name),
                "PrettyVersion": registry.get_pretty_version(package_name),
            }
        }
    except PackageNotFoundError:
        raise HTTPException(status_code=404, detail="Package not found")
    except (LoadError, EmptyDatasetError) as e:
        raise _unavailable(e)


# ---------------------------------------------------------------------------
# 3. GET /root
# ---------------------------------------------------------------------------

@router.get("/root")
async def get_root_package(registry: PackageRegistry = Depends(get_registry)) -> dict:
    try:
        root = registry.get_root_package()
    except MissingRootError:
        raise HTTPException(status_code=404, detail="Root package not found")
    except (LoadError, EmptyDatasetError) as e:
        raise _unavailable(e)
    return {"Data": root.raw()}


# ---------------------------------------------------------------------------
# 4. GET /raw
# ---------------------------------------------------------------------------

@router.get("/raw")
async def get_raw_data(registry: PackageRegistry = Depends(get_registry)) -> dict:
    """
    Every loaded dataset as stored, including fields the registry does not interpret.
    """
    try:
        datasets = registry.get_all_raw_data()
    except LoadError as e:
        raise _unavailable(e)
    return {"Data": [dataset.raw() for dataset in datasets]}


# ---------------------------------------------------------------------------
# 5. GET /show
# ---------------------------------------------------------------------------

@router.get("/show")
async def show_packages(registry: PackageRegistry = Depends(get_registry)) -> dict:
    """
    Display listing equivalent to the `show` command output.
    """
    try:
        entries = [
            {"PackageName": name, "DisplayVersion": display_version}
            for name, display_version in registry.show()
        ]
    except (LoadError, EmptyDatasetError) as e:
        raise _unavailable(e)
    return {"Data": entries}

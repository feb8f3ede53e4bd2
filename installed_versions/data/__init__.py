"""
Lazily-loaded, cached access to installed-package data.

This package is responsible for:
* Loading a dataset from its source on first use.
* Caching it for the lifetime of the registry.
* Answering read-only queries against the first dataset.
"""

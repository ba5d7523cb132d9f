"""Adapter layer package for the third-party catalog API boundary."""

from .catalog_client import CatalogHttpClient
from .catalog_errors import CatalogFailureKind, adapter_classify_failure
from .interfaces import CatalogClientPort

__all__ = [
	"CatalogClientPort",
	"CatalogFailureKind",
	"CatalogHttpClient",
	"adapter_classify_failure",
]

"""dep-doc: keep dependency documentation in sync with the project manifest."""

__version__ = "0.1.0"

from depdoc.exceptions import (
    DepDocError,
    DocFileNotFoundError,
    DocParseError,
    ManifestParseError,
    NoManifestFoundError,
    SchemaValidationError,
)
from depdoc.models import DepDocResult, DocInventory, ManifestInventory, Scope, ScopeMismatch
from depdoc.reconciler import check_dep_doc

__all__ = [
    "DepDocError",
    "DepDocResult",
    "DocFileNotFoundError",
    "DocInventory",
    "DocParseError",
    "ManifestInventory",
    "ManifestParseError",
    "NoManifestFoundError",
    "SchemaValidationError",
    "Scope",
    "ScopeMismatch",
    "check_dep_doc",
]

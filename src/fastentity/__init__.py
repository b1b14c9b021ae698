"""fastentity: single-pass, case-insensitive detection of known phrases in text."""

from __future__ import annotations

from ._errors import (
    FastEntityChecksumError,
    FastEntityError,
    FastEntityLoadError,
    FastEntityStateError,
    FastEntityVersionError,
)
from ._group import Group
from ._hash import phrase_key
from ._loader import (
    ENTITY_FILE_SUFFIX,
    add_from_lines,
    from_dir,
    load_snapshot,
    save,
    save_snapshot,
)
from ._store import Store
from ._types import Entity, StoreConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ENTITY_FILE_SUFFIX",
    "Entity",
    "FastEntityChecksumError",
    "FastEntityError",
    "FastEntityLoadError",
    "FastEntityStateError",
    "FastEntityVersionError",
    "Group",
    "Store",
    "StoreConfig",
    "add_from_lines",
    "from_dir",
    "load_snapshot",
    "phrase_key",
    "save",
    "save_snapshot",
]

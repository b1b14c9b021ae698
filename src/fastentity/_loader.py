"""Bulk loading and saving of groups: line files and msgpack snapshots."""

from __future__ import annotations

import hashlib
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgpack

from ._errors import (
    FastEntityChecksumError,
    FastEntityError,
    FastEntityLoadError,
    FastEntityStateError,
    FastEntityVersionError,
)
from ._store import Store
from ._types import StoreConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

ENTITY_FILE_SUFFIX = ".entities.csv"

_SNAPSHOT_VERSION = "1.0"
_SNAPSHOT_FILE = "groups.bin"
_MANIFEST_FILE = "manifest.json"


def _require_store(store: Any) -> Store:
    if not isinstance(store, Store):
        raise FastEntityStateError(
            f"expected an initialised Store, got {type(store).__name__}"
        )
    return store


def _file_name(group: str) -> str:
    return group.replace("/", "_") + ENTITY_FILE_SUFFIX


# -- Line-oriented source / sink --


def add_from_lines(store: Store, name: str, lines: Iterable[str]) -> int:
    """Add one phrase per line to group name. Empty lines are skipped.

    Phrases are handed to the group in batches of config.group_size_hint.
    Returns the number of phrases added.
    """
    store = _require_store(store)
    batch_size = store.config.group_size_hint
    batch: list[str] = []
    added = 0
    for line in lines:
        phrase = line.rstrip("\r\n")
        if not phrase:
            continue
        batch.append(phrase)
        if len(batch) >= batch_size:
            store.add(name, *batch)
            added += len(batch)
            batch = []
    if batch or not added:
        # An empty source still registers the group.
        store.add(name, *batch)
        added += len(batch)
    return added


def _load_file(store: Store, path: Path) -> int:
    name = path.name[: -len(ENTITY_FILE_SUFFIX)]
    with open(path, encoding="utf-8") as f:
        return add_from_lines(store, name, f)


def from_dir(
    path: Path | str,
    *,
    config: StoreConfig | None = None,
    strict: bool = False,
    max_workers: int | None = None,
) -> Store:
    """Create a store from every <group>.entities.csv file in a directory.

    Files load concurrently. A failing file never stops the others; the
    load succeeds if at least one file loaded, and failures are logged.

    Raises:
        FastEntityError: If the directory does not exist.
        FastEntityLoadError: If no entity files are found, if every file
            failed, or if strict and any file failed.
    """
    path = Path(path)
    if not path.is_dir():
        raise FastEntityError(f"entity directory not found: {path}")

    files = sorted(
        p for p in path.iterdir()
        if p.is_file() and p.name.endswith(ENTITY_FILE_SUFFIX)
    )
    if not files:
        raise FastEntityLoadError(f"no entity files found in {path}")

    store = Store(config=config)
    failures: list[tuple[Path, Exception]] = []
    loaded = 0
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {f: pool.submit(_load_file, store, f) for f in files}
        for file_path, future in futures.items():
            try:
                n = future.result()
            except (OSError, ValueError) as e:
                failures.append((file_path, e))
                logger.warning("failed to load %s: %s", file_path, e)
                continue
            loaded += 1
            logger.debug("loaded %d phrases from %s", n, file_path)

    if failures and (strict or loaded == 0):
        raise FastEntityLoadError(
            f"{len(failures)} of {len(files)} entity files failed to load",
            failures,
        )
    return store


def save(store: Store, path: Path | str) -> list[Path]:
    """Write each group to <path>/<group>.entities.csv, one phrase per line.

    The directory must already exist. Returns the written file paths.
    """
    store = _require_store(store)
    path = Path(path)
    written: list[Path] = []
    for name in store.group_names:
        group = store.group(name)
        if group is None:
            continue
        out = path / _file_name(name)
        with open(out, "w", encoding="utf-8", newline="\n") as f:
            for phrase in group.phrases():
                f.write(phrase + "\n")
        written.append(out)
    return written


# -- msgpack snapshot with manifest --


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / _MANIFEST_FILE
    if not manifest_path.exists():
        raise FastEntityError(f"{_MANIFEST_FILE} not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _SNAPSHOT_VERSION:
        raise FastEntityVersionError(
            f"Expected snapshot version {_SNAPSHOT_VERSION!r}, got {version!r}"
        )
    filepath = data_dir / _SNAPSHOT_FILE
    if not filepath.exists():
        raise FastEntityError(f"Missing snapshot file: {filepath}")
    expected = manifest.get("files", {}).get(_SNAPSHOT_FILE)
    if expected is None:
        raise FastEntityError(f"No checksum in manifest for {_SNAPSHOT_FILE}")
    actual = _sha256(filepath)
    if actual != expected:
        raise FastEntityChecksumError(
            f"Checksum mismatch for {_SNAPSHOT_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def save_snapshot(store: Store, path: Path | str) -> None:
    """Write the whole store as msgpack plus a checksummed manifest."""
    store = _require_store(store)
    data_dir = Path(path)
    data_dir.mkdir(parents=True, exist_ok=True)

    groups: dict[str, list[str]] = {}
    for name in store.group_names:
        group = store.group(name)
        if group is not None:
            groups[name] = group.phrases()
    cfg = store.config
    payload = {
        "config": {
            "max_entity_len": cfg.max_entity_len,
            "group_size_hint": cfg.group_size_hint,
            "window_size": cfg.window_size,
        },
        "groups": groups,
    }
    snapshot_path = data_dir / _SNAPSHOT_FILE
    with open(snapshot_path, "wb") as f:
        f.write(msgpack.packb(payload, use_bin_type=True))

    manifest = {
        "version": _SNAPSHOT_VERSION,
        "files": {_SNAPSHOT_FILE: _sha256(snapshot_path)},
    }
    with open(data_dir / _MANIFEST_FILE, "w") as f:
        json.dump(manifest, f, indent=2)


def load_snapshot(path: Path | str) -> Store:
    """Validate and load a snapshot written by save_snapshot."""
    data_dir = Path(path)
    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    with open(data_dir / _SNAPSHOT_FILE, "rb") as f:
        payload = msgpack.unpackb(f.read(), raw=False)

    store = Store(config=StoreConfig(**payload.get("config", {})))
    for name, phrases in payload["groups"].items():
        store.add(name, *phrases)
    return store

"""Context storage for gctx.

Keeps named snapshots of a single config file in a flat directory.
Each snapshot is stored as ``{name}.{digest}`` where ``digest`` is the
MD5 of the file content at save time, so staleness against the live
file is decided by comparing digests without reading the snapshot.
"""

from __future__ import annotations

import builtins
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from ..utils.fs import atomic_copy, ensure_dir, file_digest, file_exists


DELIMITER = "."


class ContextStoreError(Exception):
    """Base class for context store failures."""


class SourceNotFound(ContextStoreError):
    """Raised when the live config file to save does not exist."""


class ContextNotFound(ContextStoreError):
    """Raised when no snapshot is stored under a required name."""


class AmbiguousContext(ContextStoreError):
    """Raised when several stored files claim the same name."""


class InvalidContextName(ContextStoreError):
    """Raised for names that cannot be encoded in a snapshot filename."""


class Outcome(str, Enum):
    """What an operation did."""
    CREATED = "created"
    UP_TO_DATE = "up_to_date"
    UPDATED = "updated"
    SWITCHED = "switched"


def validate_name(name: str) -> str:
    """Check that a context name can be stored.

    Args:
        name: User supplied context name

    Returns:
        The name unchanged

    Raises:
        InvalidContextName: If the name is empty or contains the delimiter
            or a path separator
    """
    if not name:
        raise InvalidContextName("Context name must not be empty")
    if DELIMITER in name:
        raise InvalidContextName(f"Context name {name!r} must not contain {DELIMITER!r}")
    separators = {"/", os.sep, os.altsep} - {None}
    if any(sep in name for sep in separators):
        raise InvalidContextName(f"Context name {name!r} must not contain a path separator")
    return name


@dataclass(frozen=True, slots=True)
class ContextKey:
    """Parsed ``{name}.{digest}`` snapshot filename."""
    name: str
    digest: str

    @classmethod
    def parse(cls, filename: str) -> ContextKey | None:
        """Split a stored filename on the first delimiter.

        Returns None for names that are not snapshots: no delimiter,
        an empty name part (hidden files) or an empty digest.
        """
        name, sep, digest = filename.partition(DELIMITER)
        if not sep or not name or not digest:
            return None
        return cls(name=name, digest=digest)

    @property
    def filename(self) -> str:
        return f"{self.name}{DELIMITER}{self.digest}"


@dataclass(frozen=True, slots=True)
class StoredSnapshot:
    """A snapshot file in the store directory."""
    key: ContextKey
    path: Path

    @property
    def name(self) -> str:
        return self.key.name

    @property
    def digest(self) -> str:
        return self.key.digest


@dataclass(frozen=True)
class Resolution:
    """Result of looking up a name: absent, found or ambiguous."""
    name: str
    matches: tuple[StoredSnapshot, ...] = field(default_factory=tuple)

    @property
    def state(self) -> Literal["absent", "found", "ambiguous"]:
        if not self.matches:
            return "absent"
        if len(self.matches) == 1:
            return "found"
        return "ambiguous"

    @property
    def snapshot(self) -> StoredSnapshot | None:
        """The single match, or None unless the state is ``found``."""
        return self.matches[0] if len(self.matches) == 1 else None

    def unwrap(self) -> StoredSnapshot | None:
        """Return the snapshot (or None when absent).

        Raises:
            AmbiguousContext: If more than one file matches the name
        """
        if self.state == "ambiguous":
            files = ", ".join(m.path.name for m in self.matches)
            raise AmbiguousContext(
                f"There are more than one git context with the name {self.name}: {files}"
            )
        return self.snapshot


@dataclass
class ContextResult:
    """Result of an update or use operation."""
    outcome: Outcome
    name: str
    path: Path
    digest: str
    previous_path: Path | None = None


class ContextStore:
    """Manages named config snapshots in a store directory."""

    def __init__(self, store_dir: Path | str):
        """Initialize context store.

        The directory is not created here; ``update`` creates it on demand.

        Args:
            store_dir: Directory holding ``{name}.{digest}`` files
        """
        self.store_dir = Path(store_dir)

    @staticmethod
    def digest(path: Path | str) -> str:
        """Hex MD5 of the file at ``path``."""
        return file_digest(path)

    def resolve(self, name: str) -> Resolution:
        """Find the stored snapshot(s) for a name.

        Args:
            name: Context name

        Returns:
            Resolution carrying zero, one or several matches
        """
        validate_name(name)
        matches = tuple(s for s in self._scan() if s.name == name)
        return Resolution(name=name, matches=matches)

    def update(self, name: str, live_path: Path | str, allow_create: bool = False) -> ContextResult:
        """Save the live file under a name if it changed.

        Args:
            name: Context name
            live_path: Live config file to read
            allow_create: Create the snapshot if none exists

        Returns:
            ContextResult with outcome created, up_to_date or updated

        Raises:
            SourceNotFound: If the live file does not exist
            ContextNotFound: If nothing is stored and allow_create is False
            AmbiguousContext: If several snapshots exist for the name
        """
        validate_name(name)
        live = Path(live_path)
        if not file_exists(live):
            raise SourceNotFound(f"file {live} not exists")

        ensure_dir(self.store_dir)
        existing = self.resolve(name).unwrap()
        new_digest = self.digest(live)

        if existing is None:
            if not allow_create:
                raise ContextNotFound(f"No git context with the name {name} found")
            target = self.store_dir / ContextKey(name, new_digest).filename
            atomic_copy(live, target)
            return ContextResult(Outcome.CREATED, name, target, new_digest)

        if existing.digest == new_digest:
            return ContextResult(Outcome.UP_TO_DATE, name, existing.path, new_digest)

        # New snapshot must be in place before the old one goes away.
        target = self.store_dir / ContextKey(name, new_digest).filename
        atomic_copy(live, target)
        existing.path.unlink()
        return ContextResult(
            Outcome.UPDATED,
            name,
            target,
            new_digest,
            previous_path=existing.path,
        )

    def use(self, name: str, live_path: Path | str) -> ContextResult:
        """Overwrite the live file with a stored snapshot.

        The live file does not need to exist beforehand.

        Raises:
            ContextNotFound: If nothing is stored under the name
            AmbiguousContext: If several snapshots exist for the name
        """
        snapshot = self.resolve(name).unwrap()
        if snapshot is None:
            raise ContextNotFound(f"No git context with the name {name} found")

        # Write through a symlinked live file instead of replacing the link.
        atomic_copy(snapshot.path, Path(live_path).resolve())
        return ContextResult(Outcome.SWITCHED, name, snapshot.path, snapshot.digest)

    def list(self) -> list[StoredSnapshot]:
        """List all stored snapshots.

        Returns:
            Snapshots sorted by name, then filename
        """
        return sorted(self._scan(), key=lambda s: (s.name, s.path.name))

    def current(self, live_path: Path | str) -> builtins.list[StoredSnapshot]:
        """Snapshots whose content matches the live file.

        Returns:
            Matching snapshots, empty if the live file is missing
        """
        if not file_exists(live_path):
            return []
        live_digest = self.digest(live_path)
        return [s for s in self.list() if s.digest == live_digest]

    def _scan(self) -> builtins.list[StoredSnapshot]:
        if not self.store_dir.is_dir():
            return []

        snapshots = []
        for entry in self.store_dir.iterdir():
            if not entry.is_file():
                continue
            key = ContextKey.parse(entry.name)
            if key is not None:
                snapshots.append(StoredSnapshot(key=key, path=entry))
        return snapshots

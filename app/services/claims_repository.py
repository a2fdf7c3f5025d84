"""
Claims Repository

Holds the claims dataset as an immutable snapshot for the process lifetime.
``reload()`` parses the file into a brand-new snapshot and swaps the
reference under a lock, so readers always see either the old or the new
dataset in full.
"""
import json
import threading
from pathlib import Path
from typing import Optional, Union

from app.exceptions import DataUnavailableError
from app.models.claims import ClaimsSnapshot, Region, require_list
from app.utils.helpers import utc_now_iso
from app.utils.logger import log


def parse_dataset(payload: dict, source: str = "") -> ClaimsSnapshot:
    """Build a snapshot from the decoded dataset JSON."""
    if not isinstance(payload, dict):
        raise ValueError("Dataset root must be a JSON object")

    regions = tuple(Region.from_dict(s) for s in require_list(payload.get("states", []), "states"))

    seen = set()
    for region in regions:
        if region.id in seen:
            raise ValueError(f"Duplicate state id: {region.id}")
        seen.add(region.id)

    return ClaimsSnapshot(regions=regions, loaded_at=utc_now_iso(), source=source)


class ClaimsRepository:
    """
    Read-only access to the current claims snapshot.

    A failed initial load leaves the repository empty; every read then raises
    DataUnavailableError. A failed reload keeps the previous snapshot.
    """

    def __init__(self, data_path: Optional[Union[str, Path]] = None,
                 snapshot: Optional[ClaimsSnapshot] = None):
        self.data_path = Path(data_path) if data_path else None
        self._snapshot = snapshot
        self._load_error: Optional[str] = None
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, data_path: Union[str, Path]) -> "ClaimsRepository":
        """Create a repository and attempt the initial load."""
        repo = cls(data_path)
        try:
            repo.reload()
        except DataUnavailableError:
            # Already logged; surfaces as 500 on every read
            pass
        return repo

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def snapshot(self) -> ClaimsSnapshot:
        """Return the current snapshot or raise DataUnavailableError."""
        snap = self._snapshot
        if snap is None:
            raise DataUnavailableError(details={"reason": self._load_error})
        return snap

    def reload(self) -> ClaimsSnapshot:
        """Re-read the dataset file and atomically replace the snapshot."""
        if self.data_path is None:
            raise DataUnavailableError("No dataset path configured")

        with self._lock:
            try:
                with open(self.data_path, "r", encoding="utf-8") as f:
                    payload = json.load(f)
                snap = parse_dataset(payload, source=str(self.data_path))
            except (OSError, ValueError, KeyError, TypeError) as e:
                self._load_error = f"{type(e).__name__}: {str(e)}"
                log.error(f"Failed to load claims dataset from {self.data_path}: {self._load_error}")
                raise DataUnavailableError(details={"reason": self._load_error}) from e

            self._snapshot = snap
            self._load_error = None

        settlements = sum(len(r.settlements) for r in snap.regions)
        log.info(f"Loaded claims dataset: {len(snap.regions)} states, {settlements} villages")
        return snap

"""
Claims dataset model

Regions (states) hold an ordered list of settlements (villages) with raw
claim counts. Instances are frozen; a loaded dataset is never mutated.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

SETTLEMENT_STATUSES = ("approved", "pending", "rejected")


def require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object (got {type(value).__name__})")
    return value


def require_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a JSON array (got {type(value).__name__})")
    return value


def _claim_count(value: Any, key: str, name: Any) -> int:
    # bool is an int subclass; reject it along with floats and strings
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer (got {value!r}) for {name!r}")
    if value < 0:
        raise ValueError(f"{key} must be >= 0 (got {value}) for {name!r}")
    return value


@dataclass(frozen=True)
class Settlement:
    """A village and its claim counts."""
    name: str
    coordinates: Tuple[float, float]
    claims_filed: int
    claims_approved: int
    claims_pending: int
    status: str
    district: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settlement":
        data = require_object(data, "Village")
        status = data.get("status", "pending")
        if status not in SETTLEMENT_STATUSES:
            raise ValueError(f"Unknown settlement status: {status!r}")

        counts = {}
        for key in ("claims_filed", "claims_approved", "claims_pending"):
            counts[key] = _claim_count(data.get(key, 0), key, data.get("name"))

        lat, lon = data.get("coordinates", (0.0, 0.0))
        return cls(
            name=data["name"],
            coordinates=(float(lat), float(lon)),
            status=status,
            district=data.get("district", ""),
            **counts,
        )


@dataclass(frozen=True)
class Region:
    """A state with its districts and settlements, in dataset order."""
    id: str
    name: str
    center: Tuple[float, float]
    districts: Tuple[str, ...] = ()
    settlements: Tuple[Settlement, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Region":
        data = require_object(data, "State")
        lat, lon = data.get("center", (0.0, 0.0))
        return cls(
            id=str(data["id"]),
            name=data["name"],
            center=(float(lat), float(lon)),
            districts=tuple(require_list(data.get("districts", []), "districts")),
            settlements=tuple(Settlement.from_dict(v) for v in require_list(data.get("villages", []), "villages")),
        )


@dataclass(frozen=True)
class ClaimsSnapshot:
    """Immutable view of the whole dataset at one point in time."""
    regions: Tuple[Region, ...]
    loaded_at: str
    source: str = ""

    def region_ids(self) -> Tuple[str, ...]:
        return tuple(r.id for r in self.regions)

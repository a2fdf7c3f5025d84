"""
Shared builders for claims datasets.
"""
import json

import pytest

from app.services.claims_repository import ClaimsRepository, parse_dataset


def village(name, approved, pending, filed=None, status="pending", district="D1"):
    return {
        "name": name,
        "coordinates": [20.0, 80.0],
        "claims_filed": filed if filed is not None else approved + pending,
        "claims_approved": approved,
        "claims_pending": pending,
        "status": status,
        "district": district,
    }


def state(state_id, villages, name=None, districts=("D1",)):
    return {
        "id": state_id,
        "name": name or state_id.replace("-", " ").title(),
        "center": [21.0, 79.0],
        "districts": list(districts),
        "villages": list(villages),
    }


@pytest.fixture
def make_snapshot():
    """Build a ClaimsSnapshot from state dicts."""
    def _make(*states):
        return parse_dataset({"states": list(states)})
    return _make


@pytest.fixture
def make_repository(make_snapshot):
    """Build an in-memory ClaimsRepository from state dicts."""
    def _make(*states):
        return ClaimsRepository(snapshot=make_snapshot(*states))
    return _make


@pytest.fixture
def dataset_file(tmp_path):
    """Write a dataset to a temp file and return its path."""
    def _write(*states, raw=None):
        path = tmp_path / "fra-data.json"
        path.write_text(raw if raw is not None else json.dumps({"states": list(states)}))
        return path
    return _write


SAMPLE_STATES = [
    state("madhya-pradesh", [
        village("Kanha Village", 32, 13, filed=45, status="approved", district="Balaghat"),
        village("Mukki", 28, 30, filed=62, district="Mandla"),
        village("Samnapur", 14, 20, filed=38, status="rejected", district="Dindori"),
    ], name="Madhya Pradesh", districts=("Balaghat", "Mandla", "Dindori")),
    state("tripura", [
        village("Ambassa", 29, 11, status="approved"),
        village("Mandai", 19, 8, status="approved"),
    ], name="Tripura", districts=("Dhalai", "West Tripura")),
    state("odisha", [
        village("Jashipur", 46, 12, status="approved"),
        village("Phulbani", 35, 9, status="approved"),
        village("Lamtaput", 21, 12, filed=36),
    ], name="Odisha", districts=("Mayurbhanj", "Kandhamal", "Koraput")),
    state("telangana", [
        village("Utnoor", 45, 7, status="approved"),
        village("Bhadrachalam", 41, 7, status="approved"),
    ], name="Telangana", districts=("Adilabad", "Bhadradri Kothagudem")),
]

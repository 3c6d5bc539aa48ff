"""
Read-only facility data model parsed from the vNAS ARTCC feed.
"""

from dataclasses import dataclass, field
from typing import Dict, List


def _require(data: Dict, key: str):
    if key not in data:
        raise ValueError(f"Missing required field '{key}'")
    return data[key]


@dataclass(frozen=True)
class Location:
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, data: Dict) -> 'Location':
        return cls(lat=float(_require(data, 'lat')), lon=float(_require(data, 'lon')))


@dataclass(frozen=True)
class Transceiver:
    """A radio site with a fixed location and antenna height."""
    id: str
    name: str
    location: Location
    height_msl_meters: float = 0.0
    height_agl_meters: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict) -> 'Transceiver':
        return cls(
            id=_require(data, 'id'),
            name=data.get('name', ''),
            location=Location.from_dict(_require(data, 'location')),
            height_msl_meters=float(data.get('heightMslMeters') or 0),
            height_agl_meters=float(data.get('heightAglMeters') or 0),
        )


@dataclass(frozen=True)
class Position:
    id: str
    name: str
    transceiver_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Position':
        return cls(
            id=_require(data, 'id'),
            name=data.get('name', ''),
            transceiver_ids=list(data.get('transceiverIds') or []),
        )


@dataclass(frozen=True)
class Facility:
    id: str
    name: str
    child_facilities: List['Facility'] = field(default_factory=list)
    positions: List[Position] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Facility':
        return cls(
            id=_require(data, 'id'),
            name=data.get('name', ''),
            child_facilities=[cls.from_dict(c) for c in data.get('childFacilities') or []],
            positions=[Position.from_dict(p) for p in data.get('positions') or []],
        )


@dataclass(frozen=True)
class Artcc:
    """Top-level ARTCC with its root facility and every transceiver it owns."""
    id: str
    facility: Facility
    transceivers: List[Transceiver] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Artcc':
        return cls(
            id=_require(data, 'id'),
            facility=Facility.from_dict(_require(data, 'facility')),
            transceivers=[Transceiver.from_dict(t) for t in data.get('transceivers') or []],
        )


def parse_artccs(payload) -> List[Artcc]:
    """
    Build the ARTCC list from the decoded upstream JSON.

    Args:
        payload: Decoded JSON array of ARTCC objects

    Returns:
        List of Artcc in upstream order
    """
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of ARTCCs, got {type(payload).__name__}")
    return [Artcc.from_dict(item) for item in payload]

"""
Cascading ARTCC -> facility -> position selection and transceiver resolution.
"""

from typing import Dict, List, Optional
from config import ALL_TRANSCEIVERS
from models import Artcc, Facility, Position, Transceiver


def gather_all_facilities(facility: Facility) -> List[Facility]:
    """
    Flatten a facility subtree depth-first, parent before children.

    Args:
        facility: Root of the subtree

    Returns:
        List of facilities in pre-order
    """
    facilities = [facility]
    for child in facility.child_facilities:
        facilities.extend(gather_all_facilities(child))
    return facilities


def facility_transceivers(artcc: Artcc, facility: Facility) -> List[Transceiver]:
    """ARTCC transceivers referenced by any position in the facility, in ARTCC order."""
    used_ids = {tid for p in facility.positions for tid in p.transceiver_ids}
    return [t for t in artcc.transceivers if t.id in used_ids]


def position_transceivers(artcc: Artcc, position: Position) -> List[Transceiver]:
    """ARTCC transceivers referenced by a single position."""
    used_ids = set(position.transceiver_ids)
    return [t for t in artcc.transceivers if t.id in used_ids]


def positions_using(facility: Optional[Facility], transceiver: Transceiver) -> List[Position]:
    """Positions under the facility that use the given transceiver."""
    if facility is None:
        return []
    return [p for p in facility.positions if transceiver.id in p.transceiver_ids]


def find_artcc(artccs: List[Artcc], artcc_id: Optional[str]) -> Optional[Artcc]:
    if not artcc_id:
        return None
    return next((a for a in artccs if a.id == artcc_id), None)


class SelectionState:
    """
    The user's current selection and the transceivers it resolves to.

    Changing a tier always resets every tier below it.
    """

    def __init__(self):
        self.artcc: Optional[Artcc] = None
        self.facility: Optional[Facility] = None
        self.position: Optional[Position] = None
        self.transceivers: List[Transceiver] = []

    def select_artcc(self, artccs: List[Artcc], artcc_id: Optional[str]) -> None:
        self.artcc = find_artcc(artccs, artcc_id)
        self.facility = None
        self.position = None
        self.transceivers = []

    def select_facility(self, facility_id: Optional[str]) -> None:
        facility = None
        if self.artcc is not None and facility_id:
            facility = next(
                (f for f in gather_all_facilities(self.artcc.facility) if f.id == facility_id),
                None
            )

        self.facility = facility
        self.position = None
        if facility is not None:
            self.transceivers = facility_transceivers(self.artcc, facility)
        else:
            self.transceivers = []

    def select_position(self, position_id: Optional[str]) -> None:
        if position_id == ALL_TRANSCEIVERS:
            self.position = None
            if self.artcc is not None and self.facility is not None:
                self.transceivers = facility_transceivers(self.artcc, self.facility)
            else:
                self.transceivers = []
            return

        position = None
        if self.facility is not None and position_id:
            position = next((p for p in self.facility.positions if p.id == position_id), None)

        self.position = position
        if position is not None and self.artcc is not None:
            self.transceivers = position_transceivers(self.artcc, position)
        else:
            self.transceivers = []

    def facility_options(self) -> List[Dict]:
        if self.artcc is None:
            return []
        return [{'id': f.id, 'name': f.name} for f in gather_all_facilities(self.artcc.facility)]

    def position_options(self) -> List[Dict]:
        if self.facility is None:
            return []
        options = [{'id': ALL_TRANSCEIVERS, 'name': 'ALL TRANSCEIVERS'}]
        options.extend({'id': p.id, 'name': p.name} for p in self.facility.positions)
        return options

    def to_dict(self) -> Dict:
        return {
            'artcc': self.artcc.id if self.artcc else None,
            'facility': self.facility.id if self.facility else None,
            'position': self.position.id if self.position else None,
            'transceiverCount': len(self.transceivers),
        }


def resolve_selection(artccs: List[Artcc],
                      artcc_id: Optional[str] = None,
                      facility_id: Optional[str] = None,
                      position_id: Optional[str] = None) -> SelectionState:
    """
    Replay a full set of dropdown choices against a fresh state.

    Args:
        artccs: Parsed ARTCC dataset
        artcc_id: Selected ARTCC id (empty selects nothing)
        facility_id: Selected facility id
        position_id: Selected position id or ALL_TRANSCEIVERS

    Returns:
        The resulting SelectionState
    """
    state = SelectionState()
    state.select_artcc(artccs, artcc_id)
    if state.artcc is not None and facility_id:
        state.select_facility(facility_id)
        if state.facility is not None and position_id:
            state.select_position(position_id)
    return state

"""
Radio horizon coverage radii and map overlays for the selected transceivers.
"""

import math
from typing import Dict, List, Optional, Tuple
from config import (
    DEFAULT_UNIFORM_VALUE,
    UNIFORM_VALUE_MIN,
    UNIFORM_VALUE_MAX,
    UNIFORM_VALUE_STEP,
    FALLBACK_MAP_CENTER,
    MAP_ZOOM,
    TILE_URL
)
from models import Transceiver
from selection import SelectionState, positions_using

FEET_PER_METER = 3.28084
HORIZON_FACTOR = 1.375
METERS_PER_NAUTICAL_MILE = 1852


def radio_horizon_meters(height_feet: float) -> float:
    """
    VHF radio line-of-sight range for an antenna height.

    Formula: d_nm = 1.375 * sqrt(h_ft), converted to meters.

    Args:
        height_feet: Antenna height in feet (negative values clamp to 0)

    Returns:
        Range in meters
    """
    height_feet = max(0, height_feet)
    return HORIZON_FACTOR * math.sqrt(height_feet) * METERS_PER_NAUTICAL_MILE


def actual_range_radius(height_msl_meters: float) -> float:
    """Coverage radius in meters for a transceiver at the given height above MSL."""
    return radio_horizon_meters(height_msl_meters * FEET_PER_METER)


class CoverageSettings:
    """Uniform slider value plus the actual-range toggle."""

    def __init__(self, uniform_value: float = DEFAULT_UNIFORM_VALUE, actual_range: bool = False):
        self.uniform_value = DEFAULT_UNIFORM_VALUE
        self.actual_range = actual_range
        self.set_uniform_value(uniform_value)

    def set_uniform_value(self, value: float) -> None:
        self.uniform_value = min(max(value, UNIFORM_VALUE_MIN), UNIFORM_VALUE_MAX)

    def toggle_actual_range(self) -> None:
        # Entering actual-range mode drops any slider adjustment
        if not self.actual_range:
            self.uniform_value = DEFAULT_UNIFORM_VALUE
        self.actual_range = not self.actual_range

    def radius_for(self, transceiver: Transceiver) -> float:
        if self.actual_range:
            return actual_range_radius(transceiver.height_msl_meters)
        return radio_horizon_meters(self.uniform_value)

    def to_dict(self) -> Dict:
        return {
            'uniformValue': self.uniform_value,
            'actualRange': self.actual_range,
            'min': UNIFORM_VALUE_MIN,
            'max': UNIFORM_VALUE_MAX,
            'step': UNIFORM_VALUE_STEP,
        }


def map_center(transceivers: List[Transceiver]) -> Tuple[float, float]:
    if not transceivers:
        return FALLBACK_MAP_CENTER
    first = transceivers[0]
    return (first.location.lat, first.location.lon)


def build_overlays(selection: SelectionState, settings: CoverageSettings) -> List[Dict]:
    """
    Build one coverage circle per active transceiver.

    Args:
        selection: Current selection state
        settings: Coverage settings

    Returns:
        List of circle dictionaries with center, radius and popup details
    """
    overlays = []
    for transceiver in selection.transceivers:
        overlays.append({
            'id': transceiver.id,
            'name': transceiver.name,
            'center': [transceiver.location.lat, transceiver.location.lon],
            'radius': settings.radius_for(transceiver),
            'heightMslMeters': transceiver.height_msl_meters,
            'heightAglMeters': transceiver.height_agl_meters,
            'positions': [p.name for p in positions_using(selection.facility, transceiver)],
        })
    return overlays


def build_map_view(selection: SelectionState, settings: CoverageSettings) -> Optional[Dict]:
    """Map description for the page, or None when there is nothing to draw."""
    if not selection.transceivers:
        return None
    return {
        'center': list(map_center(selection.transceivers)),
        'zoom': MAP_ZOOM,
        'tileUrl': TILE_URL,
        'circles': build_overlays(selection, settings),
    }

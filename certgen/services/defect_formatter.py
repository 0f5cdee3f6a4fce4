"""
Defect text rendering for certificates.

A defect prints as its reference and item description, the deficiency text,
the location qualifiers and finally any tester notes, e.g.

    54.1.a.ii Power steering: not working correctly. Axles: 7. Inner Offside. Leaking
"""

import logging
from typing import Any, Dict, List, Optional

from certgen.models import (
    FlatDefect, IvaDefaults, LocationEnglish, LocationWelsh, LOCATION_KEYS, WELSH_LOCATIONS
)

logger = logging.getLogger(__name__)

NUMBERED_LOCATIONS = {
    "axleNumber": (LocationEnglish.AXLE, LocationWelsh.AXLE),
    "rowNumber": (LocationEnglish.ROW, LocationWelsh.ROW),
    "seatNumber": (LocationEnglish.SEAT, LocationWelsh.SEAT),
}


def capitalise(word: Any) -> str:
    text = str(word)
    return text[:1].upper() + text[1:]


def translate_location(value: Any) -> Any:
    """Welsh word for a free-text location, or the value itself when unknown."""
    if isinstance(value, str):
        return WELSH_LOCATIONS.get(value.lower(), value)
    return value


def _format_location(location: Optional[Dict[str, Any]], welsh: bool = False) -> str:
    if not location:
        return ""

    text = ""
    for key in LOCATION_KEYS:
        value = location.get(key)
        if not value:
            continue
        if key in NUMBERED_LOCATIONS:
            english, cymraeg = NUMBERED_LOCATIONS[key]
            label = cymraeg if welsh else english
            text += f" {label}: {value}."
        else:
            word = translate_location(value) if welsh else value
            text += f" {capitalise(word)}"
    return text + "."


def _additional_information(defect: Dict[str, Any]) -> Dict[str, Any]:
    return defect.get("additionalInformation") or {}


def format_defect(defect: Dict[str, Any]) -> str:
    text = f"{defect.get('deficiencyRef')} {defect.get('itemDescription')}"

    if defect.get("deficiencyText"):
        text += f" {defect['deficiencyText']}"

    info = _additional_information(defect)
    text += _format_location(info.get("location"))

    if info.get("notes"):
        text += f" {info['notes']}"
    return text


def format_defect_welsh(defect: Dict[str, Any], vehicle_type: str,
                        flat_defects: List[FlatDefect]) -> Optional[str]:
    """
    Welsh rendering of a defect using the translated dictionary rows.

    Returns None when the dictionary has no row for the defect reference.
    """
    ref = defect.get("deficiencyRef")
    matches = [flat for flat in flat_defects if flat.ref == ref]
    flat = filter_flat_defects(matches, vehicle_type)
    if flat is None:
        logger.error(f"Unable to find a Welsh defect for {ref}")
        return None

    text = f"{ref} {flat.item_description_welsh}"

    if defect.get("deficiencyText"):
        text += f" {flat.deficiency_text_welsh}"

    info = _additional_information(defect)
    text += _format_location(info.get("location"), welsh=True)

    if info.get("notes"):
        text += f" {info['notes']}"
    logger.debug(f"Welsh defect string generated: {text}")
    return text


def filter_flat_defects(flat_defects: List[FlatDefect], vehicle_type: str) -> Optional[FlatDefect]:
    """Pick the row meant for the vehicle type, falling back to the first row."""
    if not flat_defects:
        return None
    if len(flat_defects) == 1:
        return flat_defects[0]
    for flat in flat_defects:
        if vehicle_type in (flat.for_vehicle_type or []):
            return flat
    return flat_defects[0]


def flatten_defects(defects: List[Dict[str, Any]]) -> List[FlatDefect]:
    """Flatten the category -> item -> deficiency tree into one row per deficiency."""
    flat_defects = []
    try:
        for category in defects or []:
            for item in category.get("items") or []:
                for deficiency in item.get("deficiencies") or []:
                    flat_defects.append(FlatDefect(
                        im_number=category.get("imNumber"),
                        im_description=category.get("imDescription"),
                        im_description_welsh=category.get("imDescriptionWelsh"),
                        item_number=item.get("itemNumber"),
                        item_description=item.get("itemDescription"),
                        item_description_welsh=item.get("itemDescriptionWelsh"),
                        ref=deficiency.get("ref"),
                        deficiency_text=deficiency.get("deficiencyText"),
                        deficiency_text_welsh=deficiency.get("deficiencyTextWelsh"),
                        for_vehicle_type=deficiency.get("forVehicleType") or [],
                    ))
    except (AttributeError, TypeError) as e:
        logger.error(f"Error flattening defects: {e}")
        return []
    return flat_defects


def format_vehicle_approval_additional_defects(custom_defects: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """IVA/MSVA certificates always list at least one additional defect line."""
    if custom_defects:
        return custom_defects
    return [dict(defect) for defect in IvaDefaults.EMPTY_CUSTOM_DEFECTS]

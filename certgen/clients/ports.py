"""Capabilities the payload engine needs from other services."""

from typing import Any, Dict, List, Optional, Protocol


class VehicleRecordLookup(Protocol):
    async def get_vehicle_record(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        """Full technical record of the tested vehicle. Fails hard when none exists."""
        ...


class TrailerRegistrationLookup(Protocol):
    async def get_trailer_registration(self, vin: str, make: str) -> Dict[str, Any]:
        """{"Trn": ..., "IsTrailer": True}; Trn is None for an unregistered trailer."""
        ...


class OdometerHistoryLookup(Protocol):
    async def get_odometer_history(self, system_number: str) -> Dict[str, Any]:
        """{"OdometerHistoryList": [{"value", "unit", "date"}, ...]}"""
        ...


class DefectDictionaryLookup(Protocol):
    async def get_welsh_defect_dictionary(self) -> List[Dict[str, Any]]:
        """Nested defect tree with Welsh text. Empty list when unavailable."""
        ...


class SignatureLookup(Protocol):
    async def get_signature(self, staff_id: str) -> Optional[str]:
        """Base64 signature image of a tester, or None."""
        ...


class TestStationLookup(Protocol):
    async def is_test_station_welsh(self, test_station_p_number: str) -> bool:
        ...

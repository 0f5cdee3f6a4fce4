import asyncio
import logging
from typing import Any, Dict

from certgen.clients.ports import VehicleRecordLookup
from certgen.models import VehicleType
from certgen.services.errors import CertificateDataError

logger = logging.getLogger(__name__)

ADR_DETAILS_PREFIX = "techRecord_adrDetails_"


def make_and_model(record: Dict[str, Any]) -> Dict[str, Any]:
    """PSVs print the chassis make and model, everything else the vehicle's own."""
    if record.get("techRecord_vehicleType") == VehicleType.PSV:
        return {
            "Make": record.get("techRecord_chassisMake"),
            "Model": record.get("techRecord_chassisModel"),
        }
    return {
        "Make": record.get("techRecord_make"),
        "Model": record.get("techRecord_model"),
    }


def weight_details(vehicle_type: str, record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Design weights printed on roadworthiness certificates.

    HGVs use the train design weight; other vehicles the sum of their axle
    design weights.
    """
    details = {"dgvw": record.get("techRecord_grossDesignWeight") or 0, "weight2": 0}

    if vehicle_type == VehicleType.HGV:
        details["weight2"] = record.get("techRecord_trainDesignWeight") or 0
        return details

    if (record.get("techRecord_noOfAxles") or -1) <= 0:
        raise CertificateDataError("No axle weights for Roadworthiness test certificates!")
    details["weight2"] = sum(
        axle.get("weights_designWeight") or 0 for axle in record.get("techRecord_axles") or []
    )
    return details


def has_adr_details(record: Dict[str, Any]) -> bool:
    return any(key.startswith(ADR_DETAILS_PREFIX) for key in record)


class TechRecordService:
    """Vehicle details derived from the technical record of a tested vehicle."""

    def __init__(self, vehicle_records: VehicleRecordLookup):
        self.vehicle_records = vehicle_records

    async def get_vehicle_make_and_model(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        record = await self.vehicle_records.get_vehicle_record(test_result)
        return make_and_model(record)

    async def get_weight_details(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        record = await self.vehicle_records.get_vehicle_record(test_result)
        if not record:
            raise CertificateDataError("No vehicle found for Roadworthiness test certificate!")
        return weight_details(test_result.get("vehicleType"), record)

    async def get_adr_details(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        record = await self.vehicle_records.get_vehicle_record(test_result)
        if not record or not has_adr_details(record):
            raise CertificateDataError(
                f"No ADR details on the tech record of {test_result.get('systemNumber')}"
            )
        return record

    async def get_adr_details_with_make_and_model(self, test_result: Dict[str, Any]):
        """ADR record and make/model, looked up concurrently."""
        return await asyncio.gather(
            self.get_adr_details(test_result),
            self.get_vehicle_make_and_model(test_result),
        )

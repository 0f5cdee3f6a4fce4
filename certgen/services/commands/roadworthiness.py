from typing import Any, Dict

from certgen.models import CertificateData, TestResult, VehicleType
from certgen.services.commands.base import PayloadCommand, PayloadState
from certgen.services.defect_formatter import format_defect
from certgen.services.tech_records import TechRecordService
from certgen.utils import compact, format_certificate_date, vehicle_identifier


class RoadworthinessCertificateCommand(PayloadCommand):
    applies_to = (CertificateData.RWT_DATA,)

    def __init__(self, tech_records: TechRecordService):
        self.tech_records = tech_records

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        test_type = state.test_type
        weights = await self.tech_records.get_weight_details(test_result)

        defects = None
        if state.outcome == TestResult.FAIL:
            defects = [format_defect(defect) for defect in test_type.get("defects") or []]

        inspection_date = format_certificate_date(test_type.get("testTypeStartTimestamp"))
        content = compact({
            "Dgvw": weights["dgvw"],
            "Weight2": weights["weight2"],
            "VehicleNumber": vehicle_identifier(test_result),
            "Vin": test_result.get("vin"),
            "IssuersName": test_result.get("testerName"),
            "DateOfInspection": inspection_date,
            "TestStationPNumber": test_result.get("testStationPNumber"),
            "DocumentNumber": test_type.get("certificateNumber"),
            "Date": inspection_date,
            "Defects": defects,
            "IsTrailer": state.vehicle_type == VehicleType.TRL,
        })
        return {"RWT_DATA": content}

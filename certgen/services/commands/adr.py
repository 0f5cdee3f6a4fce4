from typing import Any, Dict

from certgen.models import CertificateData
from certgen.services.commands.base import PayloadCommand, PayloadState
from certgen.services.tech_records import TechRecordService
from certgen.utils import compact

APPLICANT_FIELDS = [
    "name", "address1", "address2", "address3",
    "postTown", "postCode", "telephoneNumber", "emailAddress",
]


class AdrCertificateCommand(PayloadCommand):
    """ADR (dangerous goods) certificate details from the tech record."""
    applies_to = (CertificateData.ADR_DATA,)

    def __init__(self, tech_records: TechRecordService):
        self.tech_records = tech_records

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        test_type = state.test_type
        record, make_and_model = await self.tech_records.get_adr_details_with_make_and_model(test_result)

        adr = "techRecord_adrDetails_"
        tank = f"{adr}tank_tankDetails_"
        tank_statement = record.get(f"{tank}tankStatement_statement")

        content = compact({
            "ChasisNumber": test_result.get("vin"),
            "RegistrationNumber": test_result.get("vrm"),
            "ApplicantDetails": compact({
                field: record.get(f"techRecord_applicantDetails_{field}")
                for field in APPLICANT_FIELDS
            }),
            "VehicleType": record.get(f"{adr}vehicleDetails_type"),
            "PermittedDangerousGoods": record.get(f"{adr}permittedDangerousGoods"),
            "BrakeEndurance": record.get(f"{adr}brakeEndurance"),
            "Weight": record.get(f"{adr}weight"),
            "TankManufacturer": record.get(f"{tank}tankManufacturer") if tank_statement else None,
            "Tc2InitApprovalNo": record.get(f"{tank}tc2Details_tc2IntermediateApprovalNo"),
            "TankManufactureSerialNo": record.get(f"{tank}tankManufacturerSerialNo"),
            "YearOfManufacture": record.get(f"{tank}yearOfManufacture"),
            "TankCode": record.get(f"{tank}tankCode"),
            "SpecialProvisions": record.get(f"{tank}specialProvisions"),
            "TankStatement": tank_statement,
            "ExpiryDate": test_type.get("testExpiryDate"),
            "AtfNameAtfPNumber": f"{test_result.get('testStationName')} {test_result.get('testStationPNumber')}",
            "Notes": test_type.get("additionalNotesRecorded"),
            "TestTypeDate": test_type.get("testTypeStartTimestamp"),
        })
        content.update(compact(make_and_model))
        return {"ADR_DATA": content}

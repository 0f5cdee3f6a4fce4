from typing import Any, Dict

from certgen.services.commands.base import PASS_OR_FAIL, PayloadCommand, PayloadState, per_section
from certgen.utils import (
    compact, earliest_date_of_next_test, format_certificate_date, vehicle_identifier
)

NO_BREAK_SPACE = "\u00a0"


class PassOrFailCommand(PayloadCommand):
    """Core certificate fields shared by pass and fail certificates."""
    applies_to = PASS_OR_FAIL

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        test_type = state.test_type
        vehicle_type = state.vehicle_type

        eu_category = test_result.get("euVehicleCategory")
        last_seatbelt_check = test_type.get("lastSeatbeltInstallationCheckDate")

        content = compact({
            "TestNumber": test_type.get("testNumber"),
            "TestStationPNumber": test_result.get("testStationPNumber"),
            "TestStationName": test_result.get("testStationName"),
            "CurrentOdometer": {
                "value": test_result.get("odometerReading"),
                "unit": test_result.get("odometerReadingUnits"),
            },
            "IssuersName": test_result.get("testerName"),
            "DateOfTheTest": format_certificate_date(test_result.get("testEndTimestamp")),
            "CountryOfRegistrationCode": test_result.get("countryOfRegistration"),
            "VehicleEuClassification": eu_category.upper() if eu_category else None,
            "RawVIN": test_result.get("vin"),
            "RawVRM": vehicle_identifier(test_result),
            "ExpiryDate": format_certificate_date(test_type.get("testExpiryDate")),
            "EarliestDateOfTheNextTest": earliest_date_of_next_test(
                test_type.get("testAnniversaryDate"), vehicle_type, state.outcome
            ),
            "SeatBeltTested": "Yes" if test_type.get("seatbeltInstallationCheckDate") else "No",
            "SeatBeltPreviousCheckDate": (
                format_certificate_date(last_seatbelt_check) if last_seatbelt_check else NO_BREAK_SPACE
            ),
            "SeatBeltNumber": test_type.get("numberOfSeatbeltsFitted"),
        })
        return per_section(state, content)

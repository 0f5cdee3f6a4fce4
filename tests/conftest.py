"""Shared fixtures: test result factories, fake lookups and a mock HTTP transport."""

import copy
from typing import Any, Dict, List, Optional

import httpx
import pytest

from certgen.clients import RemoteLookupError
from certgen.config import Settings


BASE_TEST_RESULT = {
    "testResultId": "1e8f4f8e-6f0f-4bfb-8d4b-0d3c8d7a4a11",
    "systemNumber": "10000001",
    "vin": "P012301230123",
    "vrm": "CT70VRL",
    "trailerId": "C000001",
    "vehicleType": "hgv",
    "testStationName": "Abshire-Kub",
    "testStationPNumber": "09-4129632",
    "testerName": "Dorel",
    "testerStaffId": "1",
    "createdById": "2",
    "createdByName": "Issuer Name",
    "createdAt": "2019-02-20T10:36:33.987Z",
    "testEndTimestamp": "2019-01-14T10:36:33.987Z",
    "testStatus": "submitted",
    "odometerReading": 12312,
    "odometerReadingUnits": "kilometres",
    "countryOfRegistration": "gb",
    "euVehicleCategory": "m1",
    "testTypes": {
        "testTypeId": "94",
        "testCode": "aav",
        "testNumber": "W01A00310",
        "certificateNumber": "12345",
        "testResult": "pass",
        "testExpiryDate": "2020-02-28",
        "testAnniversaryDate": "2020-01-15",
        "testTypeStartTimestamp": "2019-01-14T10:36:33.987Z",
        "seatbeltInstallationCheckDate": True,
        "lastSeatbeltInstallationCheckDate": "2019-01-14",
        "numberOfSeatbeltsFitted": 2,
        "defects": [],
    },
}

POWER_STEERING_DEFECT = {
    "deficiencyCategory": "dangerous",
    "deficiencyRef": "54.1.a.ii",
    "itemDescription": "Power steering:",
    "deficiencyText": "not working correctly and obviously affects steering control.",
    "prs": False,
    "additionalInformation": {
        "location": {"axleNumber": 7, "lateral": "offside", "horizontal": "inner"},
        "notes": "Asdasd",
    },
}

WELSH_DEFECT_TREE = [
    {
        "imNumber": 54,
        "imDescription": "Steering",
        "imDescriptionWelsh": "Llywio",
        "items": [
            {
                "itemNumber": 1,
                "itemDescription": "Power steering:",
                "itemDescriptionWelsh": "Llywio pŵer:",
                "deficiencies": [
                    {
                        "ref": "54.1.a.ii",
                        "deficiencyText": "not working correctly and obviously affects steering control.",
                        "deficiencyTextWelsh": "ddim yn gweithio'n gywir.",
                        "forVehicleType": ["psv", "hgv", "trl"],
                    },
                ],
            },
        ],
    },
]


def make_test_result(**overrides) -> Dict[str, Any]:
    """Copy of the base HGV test result with top-level and ``testTypes`` overrides."""
    result = copy.deepcopy(BASE_TEST_RESULT)
    test_types = overrides.pop("testTypes", None)
    result.update(overrides)
    if test_types:
        result["testTypes"].update(test_types)
    return result


class FakeVehicleRecords:
    def __init__(self, record: Optional[Dict[str, Any]] = None, error: Exception = None):
        self.record = record if record is not None else {
            "techRecord_vehicleType": "hgv",
            "techRecord_make": "Isuzu",
            "techRecord_model": "FM",
        }
        self.error = error
        self.calls = 0

    async def get_vehicle_record(self, test_result):
        self.calls += 1
        if self.error:
            raise self.error
        return self.record


class FakeTrailers:
    def __init__(self, trn: Optional[str] = "ABC123", error: Exception = None):
        self.trn = trn
        self.error = error
        self.calls: List[tuple] = []

    async def get_trailer_registration(self, vin, make):
        self.calls.append((vin, make))
        if self.error:
            raise self.error
        return {"Trn": self.trn, "IsTrailer": True}


class FakeOdometerHistory:
    def __init__(self, history: Optional[List[Dict[str, Any]]] = None, error: Exception = None):
        self.history = history or []
        self.error = error

    async def get_odometer_history(self, system_number):
        if self.error:
            raise self.error
        return {"OdometerHistoryList": self.history}


class FakeDefectDictionary:
    def __init__(self, tree: Optional[List[Dict[str, Any]]] = None):
        self.tree = tree if tree is not None else WELSH_DEFECT_TREE
        self.calls = 0

    async def get_welsh_defect_dictionary(self):
        self.calls += 1
        return self.tree


class FakeSignatures:
    def __init__(self, signature: Optional[str] = "c2lnbmF0dXJl"):
        self.signature = signature
        self.staff_ids: List[str] = []

    async def get_signature(self, staff_id):
        self.staff_ids.append(staff_id)
        return self.signature


class FakeTestStations:
    __test__ = False

    def __init__(self, welsh: bool = False):
        self.welsh = welsh
        self.calls = 0

    async def is_test_station_welsh(self, test_station_p_number):
        self.calls += 1
        return self.welsh


@pytest.fixture
def test_result():
    return make_test_result()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        BRANCH="develop",
        TECH_RECORDS_BASE_URL="http://tech-records.test",
        TRAILER_REGISTRATION_BASE_URL="http://trailers.test",
        TEST_RESULTS_BASE_URL="http://test-results.test",
        DEFECTS_BASE_URL="http://defects.test",
        TEST_STATIONS_BASE_URL="http://test-stations.test",
        SIGNATURE_BASE_URL="http://signatures.test/signatures",
    )


@pytest.fixture
def mock_transport():
    """Mock httpx transport returning queued responses per method and path."""

    class MockTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.requests: List[httpx.Request] = []
            self.responses: Dict[str, List[Dict[str, Any]]] = {}

        def add_response(self, method: str, path: str, json_data: Any = None,
                         status_code: int = 200, text: str = None):
            key = f"{method.upper()} {path}"
            response = {"status_code": status_code}
            if text is not None:
                response["text"] = text
            elif json_data is not None:
                response["json"] = json_data
            self.responses.setdefault(key, []).append(response)

        def requests_to(self, path: str) -> List[httpx.Request]:
            return [request for request in self.requests if request.url.path == path]

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            key = f"{request.method} {request.url.path}"
            queued = self.responses.get(key)
            if not queued:
                return httpx.Response(404, json={"message": "not found"}, request=request)
            # The last queued response answers every further request
            response = queued.pop(0) if len(queued) > 1 else queued[0]
            return httpx.Response(request=request, **response)

    return MockTransport()


@pytest.fixture
def lookup_error():
    return RemoteLookupError(500, "Lambda invocation returned error: 500 boom")

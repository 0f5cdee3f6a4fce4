import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from certgen.clients import (
    DefectsClient, SignatureClient, TechRecordsClient, TestResultsClient,
    TestStationsClient, TrailerRegistrationClient
)
from certgen.clients.ports import (
    DefectDictionaryLookup, OdometerHistoryLookup, SignatureLookup,
    TestStationLookup, TrailerRegistrationLookup, VehicleRecordLookup
)
from certgen.config import Settings, settings as default_settings
from certgen.models import CertificateData, TestStatus
from certgen.services.certificate_types import resolve_certificate_type
from certgen.services.commands import (
    AdrCertificateCommand, DefectsCommand, IvaCertificateCommand, MakeAndModelCommand,
    MsvaCertificateCommand, OdometerHistoryCommand, PassOrFailCommand,
    RoadworthinessCertificateCommand, SignatureCommand, TestHistoryCommand, WatermarkCommand
)
from certgen.services.errors import InvalidTestResultError
from certgen.services.payload_generator import CertificatePayloadGenerator
from certgen.services.tech_records import TechRecordService

logger = logging.getLogger(__name__)


@dataclass
class GeneratedPayload:
    template: str
    document_name: str
    certificate_data: CertificateData
    is_welsh: bool
    payload: Dict[str, Any]


def build_payload_generator(vehicle_records: VehicleRecordLookup,
                            trailers: TrailerRegistrationLookup,
                            odometer_history: OdometerHistoryLookup,
                            defect_dictionary: DefectDictionaryLookup,
                            signatures: SignatureLookup,
                            watermark: str) -> CertificatePayloadGenerator:
    """Wire the payload commands in their merge order."""
    tech_records = TechRecordService(vehicle_records)
    return CertificatePayloadGenerator([
        PassOrFailCommand(),
        RoadworthinessCertificateCommand(tech_records),
        AdrCertificateCommand(tech_records),
        IvaCertificateCommand(),
        MsvaCertificateCommand(),
        SignatureCommand(signatures),
        WatermarkCommand(watermark),
        TestHistoryCommand(),
        DefectsCommand(defect_dictionary),
        MakeAndModelCommand(tech_records, trailers),
        OdometerHistoryCommand(odometer_history),
    ])


def validate_test_result(test_result: Dict[str, Any]):
    test_result_id = test_result.get("testResultId")
    value = str(test_result_id)
    try:
        canonical = str(uuid.UUID(value)) == value.lower()
    except ValueError:
        canonical = False
    if not canonical:
        raise InvalidTestResultError(f"Bad Test Record: {test_result_id}")

    if test_result.get("testStatus") == TestStatus.CANCELLED:
        raise InvalidTestResultError(f"Test result {test_result_id} is cancelled")
    if not test_result.get("testTypes"):
        raise InvalidTestResultError(f"Test result {test_result_id} has no test type")


class CertificateGenerationService:
    """Turns a test result into the payload for its certificate template."""

    def __init__(self, generator: CertificatePayloadGenerator, test_stations: TestStationLookup,
                 settings: Optional[Settings] = None):
        self.generator = generator
        self.test_stations = test_stations
        self.settings = settings or default_settings

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CertificateGenerationService":
        """Service backed by the HTTP clients configured in ``settings``."""
        settings = settings or default_settings
        test_results = TestResultsClient(settings)
        generator = build_payload_generator(
            vehicle_records=TechRecordsClient(settings),
            trailers=TrailerRegistrationClient(settings),
            odometer_history=test_results,
            defect_dictionary=DefectsClient(settings),
            signatures=SignatureClient(settings),
            watermark=settings.watermark,
        )
        return cls(generator, TestStationsClient(settings), settings)

    async def is_welsh(self, test_result: Dict[str, Any]) -> bool:
        outcome = (test_result.get("testTypes") or {}).get("testResult")
        if not self.settings.is_welsh_translation_enabled(outcome):
            return False
        return await self.test_stations.is_test_station_welsh(test_result.get("testStationPNumber"))

    async def generate_payload(self, test_result: Dict[str, Any]) -> GeneratedPayload:
        validate_test_result(test_result)

        is_welsh = await self.is_welsh(test_result)
        certificate_type = resolve_certificate_type(test_result, is_welsh)
        logger.info(
            f"Test result {test_result.get('testResultId')} resolved to "
            f"{certificate_type.template} ({certificate_type.document_name})"
        )

        payload = await self.generator.generate_certificate_data(
            test_result, certificate_type.certificate_data, is_welsh
        )
        return GeneratedPayload(
            template=certificate_type.template,
            document_name=certificate_type.document_name,
            certificate_data=certificate_type.certificate_data,
            is_welsh=is_welsh,
            payload=payload,
        )

import pytest

from certgen.config import Settings
from certgen.models import CertificateData
from certgen.services import CertificateGenerationService, InvalidTestResultError, build_payload_generator

from tests.conftest import (
    POWER_STEERING_DEFECT, FakeDefectDictionary, FakeOdometerHistory, FakeSignatures,
    FakeTestStations, FakeTrailers, FakeVehicleRecords, make_test_result
)


def welsh_settings(**overrides):
    values = {
        "_env_file": None,
        "WELSH_TRANSLATION_ENABLED": True,
        "WELSH_TRANSLATE_PASS": True,
        "WELSH_TRANSLATE_FAIL": True,
        "WELSH_TRANSLATE_PRS": False,
    }
    values.update(overrides)
    return Settings(**values)


def service(settings, welsh_station=False, dictionary=None):
    generator = build_payload_generator(
        vehicle_records=FakeVehicleRecords(),
        trailers=FakeTrailers(),
        odometer_history=FakeOdometerHistory(),
        defect_dictionary=dictionary or FakeDefectDictionary(),
        signatures=FakeSignatures(),
        watermark=settings.watermark,
    )
    stations = FakeTestStations(welsh=welsh_station)
    return CertificateGenerationService(generator, stations, settings), stations


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("test_result_id", [
        None, "", "not-a-uuid", "1234",
        "1f3bd2e47c5a4b2e9d1a0c6e8f7b3a21",
        "{1f3bd2e4-7c5a-4b2e-9d1a-0c6e8f7b3a21}",
        "urn:uuid:1f3bd2e4-7c5a-4b2e-9d1a-0c6e8f7b3a21",
    ])
    async def test_bad_test_result_id(self, settings, test_result_id):
        svc, _ = service(settings)
        with pytest.raises(InvalidTestResultError, match="Bad Test Record"):
            await svc.generate_payload(make_test_result(testResultId=test_result_id))

    @pytest.mark.asyncio
    async def test_cancelled_test(self, settings):
        svc, _ = service(settings)
        with pytest.raises(InvalidTestResultError):
            await svc.generate_payload(make_test_result(testStatus="cancelled"))


class TestWelshEligibility:
    @pytest.mark.asyncio
    async def test_english_when_translation_disabled(self, settings):
        svc, stations = service(settings, welsh_station=True)

        generated = await svc.generate_payload(make_test_result())

        assert generated.is_welsh is False
        assert generated.template == "hgv_pass"
        assert stations.calls == 0

    @pytest.mark.asyncio
    async def test_welsh_station_gets_bilingual_certificate(self):
        dictionary = FakeDefectDictionary()
        svc, _ = service(welsh_settings(), welsh_station=True, dictionary=dictionary)
        test_result = make_test_result(testTypes={"testResult": "fail", "defects": [POWER_STEERING_DEFECT]})

        generated = await svc.generate_payload(test_result)

        assert generated.is_welsh is True
        assert generated.template == "hgv_fail_bilingual"
        assert generated.document_name == "VTG30_BILINGUAL.pdf"
        assert generated.certificate_data == CertificateData.FAIL_DATA
        assert "DangerousDefectsWelsh" in generated.payload["FAIL_DATA"]
        assert dictionary.calls == 1

    @pytest.mark.asyncio
    async def test_english_station(self):
        svc, stations = service(welsh_settings(), welsh_station=False)

        generated = await svc.generate_payload(make_test_result())

        assert generated.is_welsh is False
        assert stations.calls == 1

    @pytest.mark.asyncio
    async def test_outcome_flag_off(self):
        svc, stations = service(welsh_settings(), welsh_station=True)

        generated = await svc.generate_payload(make_test_result(testTypes={"testResult": "prs"}))

        assert generated.is_welsh is False
        assert generated.template == "hgv_prs"
        assert stations.calls == 0


class TestWatermark:
    @pytest.mark.asyncio
    async def test_prod_has_no_watermark(self):
        settings = Settings(_env_file=None, BRANCH="prod")
        svc, _ = service(settings)

        generated = await svc.generate_payload(make_test_result())

        assert generated.payload["Watermark"] == ""

    @pytest.mark.asyncio
    async def test_other_branches_are_watermarked(self, settings):
        svc, _ = service(settings)
        generated = await svc.generate_payload(make_test_result())
        assert generated.payload["Watermark"] == "NOT VALID"


def test_from_settings_wires_http_clients(settings):
    svc = CertificateGenerationService.from_settings(settings)

    assert svc.settings is settings
    assert svc.test_stations.base_url == "http://test-stations.test"
    assert len(svc.generator.commands) == 11

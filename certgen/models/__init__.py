from .enums import (
    VehicleType, TestResult, TestStatus, CertificateData,
    DefectCategory, DefectBucketName, LocationEnglish, LocationWelsh,
    WELSH_LOCATIONS, LOCATION_KEYS, IvaDefaults, ANNUAL_WITH_CERTIFICATE,
    ROADWORTHINESS_TEST_TYPE_IDS, ADR_TEST_TYPE_IDS, BASIC_IVA_TEST_TYPE_IDS,
    IVA_TEST_TYPE_IDS, MSVA_TEST_TYPE_IDS, AVAILABLE_WELSH
)
from .defects import FlatDefect, DefectBucket

__all__ = [
    "VehicleType", "TestResult", "TestStatus", "CertificateData",
    "DefectCategory", "DefectBucketName", "LocationEnglish", "LocationWelsh",
    "WELSH_LOCATIONS", "LOCATION_KEYS", "IvaDefaults", "ANNUAL_WITH_CERTIFICATE",
    "ROADWORTHINESS_TEST_TYPE_IDS", "ADR_TEST_TYPE_IDS", "BASIC_IVA_TEST_TYPE_IDS",
    "IVA_TEST_TYPE_IDS", "MSVA_TEST_TYPE_IDS", "AVAILABLE_WELSH",
    "FlatDefect", "DefectBucket",
]

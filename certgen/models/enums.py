import enum


class VehicleType:
    PSV = "psv"
    HGV = "hgv"
    TRL = "trl"


class TestResult:
    __test__ = False

    PASS = "pass"
    FAIL = "fail"
    PRS = "prs"
    ABANDONED = "abandoned"


class TestStatus:
    __test__ = False

    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class CertificateData(str, enum.Enum):
    """Top-level payload sections a certificate template consumes."""
    PASS_DATA = "PASS_DATA"
    FAIL_DATA = "FAIL_DATA"
    RWT_DATA = "RWT_DATA"
    ADR_DATA = "ADR_DATA"
    IVA_DATA = "IVA_DATA"
    MSVA_DATA = "MSVA_DATA"


class DefectCategory:
    DANGEROUS = "dangerous"
    MAJOR = "major"
    MINOR = "minor"
    ADVISORY = "advisory"


class DefectBucketName(str, enum.Enum):
    DANGEROUS = "Dangerous"
    MAJOR = "Major"
    PRS = "PRS"
    MINOR = "Minor"
    ADVISORY = "Advisory"


class LocationEnglish:
    ROW = "Rows"
    SEAT = "Seats"
    AXLE = "Axles"


class LocationWelsh:
    ROW = "Rhesi"
    SEAT = "Seddi"
    AXLE = "Echelau"


# Welsh words for free-text location qualifiers
WELSH_LOCATIONS = {
    "front": "blaen",
    "rear": "cefn",
    "upper": "uchaf",
    "lower": "isaf",
    "nearside": "ochr mewnol",
    "offside": "allanol",
    "centre": "canol",
    "inner": "mewnol",
    "outer": "allanol",
}

# Rendering order of location qualifiers
LOCATION_KEYS = [
    "axleNumber",
    "horizontal",
    "lateral",
    "longitudinal",
    "vertical",
    "rowNumber",
    "seatNumber",
]


class IvaDefaults:
    EMPTY_CUSTOM_DEFECTS = [{"defectName": "None", "defectNotes": ""}]
    BASIC = "Basic"
    NORMAL = "Normal"


ANNUAL_WITH_CERTIFICATE = "Annual With Certificate"

ROADWORTHINESS_TEST_TYPE_IDS = ["62", "63", "91", "101", "122"]
ADR_TEST_TYPE_IDS = ["50", "59", "60"]
BASIC_IVA_TEST_TYPE_IDS = ["125", "129", "154", "158", "159", "185"]
IVA_TEST_TYPE_IDS = BASIC_IVA_TEST_TYPE_IDS + [
    "126", "128", "130", "153", "184", "186", "187", "188",
    "189", "190", "191", "192", "193", "194", "195", "196", "197",
]
MSVA_TEST_TYPE_IDS = ["133", "134", "135", "136", "138", "139", "140"]

AVAILABLE_WELSH = [
    f"{vehicle_type}_{result}"
    for vehicle_type in (VehicleType.PSV, VehicleType.HGV, VehicleType.TRL)
    for result in (TestResult.PASS, TestResult.FAIL, TestResult.PRS)
]

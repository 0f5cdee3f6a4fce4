from .base import RemoteLookupError, ServiceClient
from .tech_records import TechRecordsClient
from .trailers import TrailerRegistrationClient
from .test_results import TestResultsClient
from .defects import DefectsClient
from .test_stations import TestStationsClient
from .signatures import SignatureClient

__all__ = [
    "RemoteLookupError", "ServiceClient",
    "TechRecordsClient", "TrailerRegistrationClient", "TestResultsClient",
    "DefectsClient", "TestStationsClient", "SignatureClient",
]

from .errors import CertificateGenerationError, InvalidTestResultError, CertificateDataError
from .defect_formatter import (
    format_defect, format_defect_welsh, filter_flat_defects, flatten_defects,
    format_vehicle_approval_additional_defects
)
from .defect_classifier import classify, bucket_defects, generate_defects
from .certificate_types import CertificateType, resolve_certificate_type, DOCUMENT_NAMES
from .tech_records import TechRecordService
from .payload_generator import CertificatePayloadGenerator, merge_payload
from .certificate_generation import (
    CertificateGenerationService, GeneratedPayload, build_payload_generator
)

__all__ = [
    "CertificateGenerationError", "InvalidTestResultError", "CertificateDataError",
    "format_defect", "format_defect_welsh", "filter_flat_defects", "flatten_defects",
    "format_vehicle_approval_additional_defects",
    "classify", "bucket_defects", "generate_defects",
    "CertificateType", "resolve_certificate_type", "DOCUMENT_NAMES",
    "TechRecordService",
    "CertificatePayloadGenerator", "merge_payload",
    "CertificateGenerationService", "GeneratedPayload", "build_payload_generator",
]

from .base import PayloadCommand, PayloadState
from .pass_or_fail import PassOrFailCommand
from .roadworthiness import RoadworthinessCertificateCommand
from .adr import AdrCertificateCommand
from .iva import IvaCertificateCommand
from .msva import MsvaCertificateCommand
from .signature import SignatureCommand
from .watermark import WatermarkCommand
from .test_history import TestHistoryCommand
from .defects import DefectsCommand
from .make_and_model import MakeAndModelCommand
from .odometer_history import OdometerHistoryCommand

__all__ = [
    "PayloadCommand", "PayloadState",
    "PassOrFailCommand", "RoadworthinessCertificateCommand", "AdrCertificateCommand",
    "IvaCertificateCommand", "MsvaCertificateCommand", "SignatureCommand",
    "WatermarkCommand", "TestHistoryCommand", "DefectsCommand",
    "MakeAndModelCommand", "OdometerHistoryCommand",
]

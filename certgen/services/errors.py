class CertificateGenerationError(Exception):
    """Certificate payload could not be generated"""
    pass


class InvalidTestResultError(CertificateGenerationError):
    """Test result is not fit for certificate generation"""
    pass


class CertificateDataError(CertificateGenerationError):
    """Data the certificate type requires is missing from the vehicle record"""
    pass

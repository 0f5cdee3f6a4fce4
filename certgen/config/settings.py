from typing import Dict
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Deployment
    BRANCH: str = Field(default="develop")  # "prod" removes the watermark
    LOG_LEVEL: str = Field(default="INFO")

    # Upstream services
    TECH_RECORDS_BASE_URL: str = Field(default="http://localhost:3005")
    TRAILER_REGISTRATION_BASE_URL: str = Field(default="http://localhost:3006")
    TEST_RESULTS_BASE_URL: str = Field(default="http://localhost:3007")
    DEFECTS_BASE_URL: str = Field(default="http://localhost:3008")
    TEST_STATIONS_BASE_URL: str = Field(default="http://localhost:3009")
    SIGNATURE_BASE_URL: str = Field(default="http://localhost:3010/signatures")
    SERVICES_API_KEY: str = Field(default="")
    REQUEST_TIMEOUT: float = Field(default=30.0)

    # Welsh translation feature flags
    WELSH_TRANSLATION_ENABLED: bool = Field(default=False)
    WELSH_TRANSLATE_PASS: bool = Field(default=False)
    WELSH_TRANSLATE_FAIL: bool = Field(default=False)
    WELSH_TRANSLATE_PRS: bool = Field(default=False)

    # Documents
    DOCUMENT_DIR: str = Field(default="CVS")

    @property
    def watermark(self) -> str:
        return "" if self.BRANCH == "prod" else "NOT VALID"

    @property
    def welsh_translation_flags(self) -> Dict[str, bool]:
        return {
            "pass": self.WELSH_TRANSLATE_PASS,
            "fail": self.WELSH_TRANSLATE_FAIL,
            "prs": self.WELSH_TRANSLATE_PRS,
        }

    def is_welsh_translation_enabled(self, test_result: str) -> bool:
        """Welsh output is switched on globally and for the given outcome."""
        if not self.WELSH_TRANSLATION_ENABLED:
            return False
        return self.welsh_translation_flags.get(test_result, False)

    @property
    def request_headers(self) -> Dict[str, str]:
        if not self.SERVICES_API_KEY:
            return {}
        return {"x-api-key": self.SERVICES_API_KEY}

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()

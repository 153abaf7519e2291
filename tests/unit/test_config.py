from datetime import UTC
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from payment_initiation.config import PaymentInitiationSettings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "BUSINESS_TIMEZONE"):
        monkeypatch.delenv(f"PAYMENT_INITIATION_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestPaymentInitiationSettingsDefaults:
    def test_defaults(self) -> None:
        settings = PaymentInitiationSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.business_timezone == "UTC"
        assert settings.business_tzinfo() is UTC


class TestPaymentInitiationSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENT_INITIATION_LOG_LEVEL", "debug")
        monkeypatch.setenv("PAYMENT_INITIATION_LOG_FORMAT", "text")
        monkeypatch.setenv("PAYMENT_INITIATION_BUSINESS_TIMEZONE", "Europe/Madrid")

        settings = PaymentInitiationSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.business_tzinfo() == ZoneInfo("Europe/Madrid")

    def test_unprefixed_variables_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert PaymentInitiationSettings().log_level == "INFO"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestPaymentInitiationSettingsValidation:
    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            PaymentInitiationSettings(log_level="LOUD")

    def test_rejects_unknown_log_format(self) -> None:
        with pytest.raises(ValidationError):
            PaymentInitiationSettings(log_format="xml")

    def test_rejects_unknown_timezone(self) -> None:
        with pytest.raises(ValidationError):
            PaymentInitiationSettings(business_timezone="Mars/Olympus_Mons")

    def test_utc_is_case_insensitive(self) -> None:
        settings = PaymentInitiationSettings(business_timezone="utc")

        assert settings.business_tzinfo() is UTC

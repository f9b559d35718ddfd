"""Unit tests for the upload screening gate."""

from listing_photos.core.models import ValidationConfig
from listing_photos.core.services import BatchValidator, ImageQualityValidator
from listing_photos.core.uploads import (
    REJECTED_MESSAGE,
    UPLOAD_VALIDATION_CONFIG,
    UploadScreeningService,
)
from listing_photos.testing.fakes import FakeDecoder, FakeLogger, pad_to_size

JPEG_HEADER = b"\xff\xd8\xff\xe0"


def make_service(decoder, enabled=True, config=None, logger=None):
    logger = logger or FakeLogger()
    validator = ImageQualityValidator(decoder=decoder, logger=logger)
    return UploadScreeningService(
        batch_validator=BatchValidator(validator=validator, logger=logger),
        config=config,
        enabled=enabled,
        logger=logger,
    )


class TestUploadPreset:
    """Tests for the upload preset."""

    def test_preset_values(self):
        assert UPLOAD_VALIDATION_CONFIG.min_width == 400
        assert UPLOAD_VALIDATION_CONFIG.min_height == 300
        assert UPLOAD_VALIDATION_CONFIG.min_file_size == 50 * 1024

    def test_service_uses_preset_by_default(self):
        service = make_service(FakeDecoder(1600, 1200, "jpeg"))

        assert service.config == UPLOAD_VALIDATION_CONFIG


class TestUploadScreeningService:
    """Tests for UploadScreeningService.screen."""

    def test_disabled_accepts_without_checking(self):
        decoder = FakeDecoder(10, 10, "gif")
        service = make_service(decoder, enabled=False)

        decision = service.screen([b"junk"])

        assert decision.accepted is True
        assert decision.checked is False
        assert decoder.call_count == 0

    def test_rejects_on_errors(self):
        service = make_service(FakeDecoder(1600, 1200, "jpeg"))

        # 20KB passes the library default but not the upload preset
        decision = service.screen([pad_to_size(JPEG_HEADER, 20 * 1024)])

        assert decision.accepted is False
        assert decision.checked is True
        assert decision.message == REJECTED_MESSAGE
        assert decision.errors == ["Image 1: Image too small (20.0KB). Minimum: 50.0KB"]

    def test_warnings_do_not_reject(self):
        logger = FakeLogger()
        service = make_service(FakeDecoder(500, 480, "jpeg"), logger=logger)

        decision = service.screen([pad_to_size(JPEG_HEADER, 60000)])

        assert decision.accepted is True
        assert decision.errors == []
        assert len(decision.warnings) == 1
        assert decision.warnings[0].startswith("Image 1: Image appears to be square")
        assert logger.get_logs("WARNING")

    def test_custom_config(self):
        service = make_service(
            FakeDecoder(1600, 1200, "jpeg"), config=ValidationConfig(min_file_size=1000)
        )

        decision = service.screen([pad_to_size(JPEG_HEADER, 20 * 1024)])

        assert decision.accepted is True

    def test_enabled_from_environment(self, monkeypatch):
        monkeypatch.setenv("LISTING_PHOTOS_ENABLE_QUALITY_VALIDATION", "true")

        service = UploadScreeningService(logger=FakeLogger())

        assert service.enabled is True

    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("LISTING_PHOTOS_ENABLE_QUALITY_VALIDATION", raising=False)

        service = UploadScreeningService(logger=FakeLogger())

        assert service.enabled is False

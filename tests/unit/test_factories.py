"""Unit tests for the service factories."""

import logging

from listing_photos.core.config import Settings
from listing_photos.core.decoders import NullDecoder, PillowDecoder
from listing_photos.core.factories import (
    LoggerAdapter,
    LoggerFactory,
    ValidationPipelineFactory,
)
from listing_photos.core.models import ValidationConfig
from listing_photos.core.uploads import UPLOAD_VALIDATION_CONFIG, UploadScreeningService
from listing_photos.testing.fakes import FakeDecoder, FakeLogger


class TestLoggerFactory:
    def test_create_logger_returns_adapter(self):
        logger = LoggerFactory.create_logger("factory-test")

        assert isinstance(logger, LoggerAdapter)
        assert logging.getLogger("listing-photos.factory-test").level == logging.NOTSET

    def test_create_logger_with_level(self):
        LoggerFactory.create_logger("factory-debug", level=logging.DEBUG)

        assert logging.getLogger("listing-photos.factory-debug").level == logging.DEBUG

    def test_adapter_forwards_messages(self, caplog):
        adapter = LoggerAdapter(logging.getLogger("test-adapter"))

        with caplog.at_level(logging.DEBUG, logger="test-adapter"):
            adapter.debug("decoding")
            adapter.warning("square photo")

        assert [record.getMessage() for record in caplog.records] == [
            "decoding",
            "square photo",
        ]


class TestValidationPipelineFactory:
    def test_create_validator_selects_default_decoder(self):
        validator = ValidationPipelineFactory.create_validator(logger=FakeLogger())

        assert isinstance(validator.decoder, PillowDecoder)

    def test_create_validator_with_injected_decoder(self):
        decoder = FakeDecoder(800, 600, "jpeg")

        validator = ValidationPipelineFactory.create_validator(decoder=decoder)

        assert validator.decoder is decoder

    def test_create_validator_without_decoder(self):
        validator = ValidationPipelineFactory.create_validator(
            decoder=FakeDecoder(800, 600, "jpeg"), use_decoder=False
        )

        assert isinstance(validator.decoder, NullDecoder)

    def test_create_batch_validator(self):
        batch_validator = ValidationPipelineFactory.create_batch_validator(
            processor="multithread", max_workers=2, logger=FakeLogger()
        )

        assert batch_validator.processor == "multithread"

    def test_create_screening_service(self):
        settings = Settings(enable_quality_validation=True, processor="asyncio")

        service = ValidationPipelineFactory.create_screening_service(
            settings, decoder=FakeDecoder(800, 600, "jpeg"), logger=FakeLogger()
        )

        assert isinstance(service, UploadScreeningService)
        assert service.enabled is True
        assert service.config == UPLOAD_VALIDATION_CONFIG

    def test_screening_service_ignores_general_thresholds(self):
        settings = Settings(
            enable_quality_validation=True,
            validation=ValidationConfig(min_width=1000, min_file_size=1),
        )

        service = ValidationPipelineFactory.create_screening_service(
            settings, decoder=FakeDecoder(800, 600, "jpeg"), logger=FakeLogger()
        )

        assert service.config == UPLOAD_VALIDATION_CONFIG

    def test_screening_service_with_explicit_config(self):
        config = ValidationConfig(min_width=1000)

        service = ValidationPipelineFactory.create_screening_service(
            Settings(), decoder=FakeDecoder(800, 600, "jpeg"), logger=FakeLogger(), config=config
        )

        assert service.config is config
        assert service.enabled is False

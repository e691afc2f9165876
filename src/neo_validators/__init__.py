"""Neo-Validators - reusable field-level request validators.

Validators for Brazilian document numbers, base64 encoded files and
images (single, list and name-keyed map), direct uploads, enum codes and
values, and cross-field date ranges. Failures are reported as one
localized violation per call through a ViolationSink.

Logging is not configured on import; call ``setup_logging()`` from the
application if the library's console handler is wanted.
"""

from .__version__ import __version__

from .config import (
    LoggingConfig,
    MessageKeys,
    SupportedLocales,
    ValidationDefaults,
    ValidatorSettings,
    get_logger,
    get_settings,
    setup_logging,
)

from .core import (
    # Exceptions
    NeoValidatorsError,
    AccessorError,
    ConfigurationError,
    EncodedFileError,
    FieldAccessError,
    InvalidEncodedContentError,
    MalformedEncodedFileError,
    UnsupportedTemporalTypeError,

    # Protocols
    ContentSniffer,
    MessageResolver,
    ViolationSink,

    # Value objects
    FileSize,
    FileValidationOptions,
    MediaTypeExtension,
    TemporalValue,
    ValidationConfig,
    Violation,
)

from .application.decoders import Base64ContentDecoder
from .application.validators import (
    Base64FileListValidator,
    Base64FileMapValidator,
    Base64FileValidator,
    Base64ImageValidator,
    DateRangeOptions,
    DateRangeValidator,
    DocumentNumberValidator,
    EnumCodeValidator,
    EnumValidationOptions,
    EnumValueValidator,
    UploadFileListValidator,
    UploadFileValidator,
    create_base64_file_list_validator,
    create_base64_file_map_validator,
    create_base64_file_validator,
    create_base64_image_validator,
    create_date_range_validator,
    create_document_number_validator,
    create_enum_code_validator,
    create_enum_value_validator,
    create_upload_file_list_validator,
    create_upload_file_validator,
)

from .infrastructure import CatalogMessageResolver, ViolationCollector

__all__ = [
    "__version__",

    # Configuration
    "LoggingConfig",
    "MessageKeys",
    "SupportedLocales",
    "ValidationDefaults",
    "ValidatorSettings",
    "get_logger",
    "get_settings",
    "setup_logging",

    # Exceptions
    "NeoValidatorsError",
    "AccessorError",
    "ConfigurationError",
    "EncodedFileError",
    "FieldAccessError",
    "InvalidEncodedContentError",
    "MalformedEncodedFileError",
    "UnsupportedTemporalTypeError",

    # Protocols
    "ContentSniffer",
    "MessageResolver",
    "ViolationSink",

    # Value objects
    "FileSize",
    "FileValidationOptions",
    "MediaTypeExtension",
    "TemporalValue",
    "ValidationConfig",
    "Violation",

    # Validators
    "Base64ContentDecoder",
    "Base64FileListValidator",
    "Base64FileMapValidator",
    "Base64FileValidator",
    "Base64ImageValidator",
    "DateRangeOptions",
    "DateRangeValidator",
    "DocumentNumberValidator",
    "EnumCodeValidator",
    "EnumValidationOptions",
    "EnumValueValidator",
    "UploadFileListValidator",
    "UploadFileValidator",
    "create_base64_file_list_validator",
    "create_base64_file_map_validator",
    "create_base64_file_validator",
    "create_base64_image_validator",
    "create_date_range_validator",
    "create_document_number_validator",
    "create_enum_code_validator",
    "create_enum_value_validator",
    "create_upload_file_list_validator",
    "create_upload_file_validator",

    # Infrastructure
    "CatalogMessageResolver",
    "ViolationCollector",
]

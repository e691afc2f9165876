"""Constants for neo-validators.

This module defines the message keys, size units and default policies
shared by every validator. Message keys are resolved to localized text by
a MessageResolver; validators never hardcode user-facing strings.
"""

from typing import Final


class ValidationDefaults:
    """Default bounds and policies used when a validator is initialized."""

    BYTES_IN_ONE_MB: Final[int] = 1024 * 1024

    MAX_SIZE_IN_MB: Final[int] = 2
    MAX_FILE_COUNT: Final[int] = 5
    MAX_TOTAL_SIZE_IN_MB: Final[int] = 10

    ACTUAL_SIZE_PRECISION: Final[int] = 4
    LIMIT_SIZE_PRECISION: Final[int] = 0

    VALID_VALUES_SEPARATOR: Final[str] = ", "

    ALLOWED_MEDIA_TYPES: Final[tuple] = (
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/bmp",
        "image/webp",
        "text/plain",
        "text/csv",
        "application/pdf",
        "application/msword",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


class SupportedLocales:
    """Locales shipped with the bundled message catalogs."""

    EN_US: Final[str] = "en_US"
    PT_BR: Final[str] = "pt_BR"


class MessageKeys:
    """Message keys, one per validation failure condition."""

    # Document numbers (CPF / CNPJ)
    CPF_CNPJ_INVALID: Final[str] = "msg.validation.request.field.cpfcnpj.invalid"
    CPF_CNPJ_INVALID_LENGTH: Final[str] = "msg.validation.request.field.cpfcnpj.invalid.length"
    CPF_INVALID_CHECK_DIGIT: Final[str] = "msg.validation.request.field.cpf.invalid.check.digit"
    CNPJ_INVALID_CHECK_DIGIT: Final[str] = "msg.validation.request.field.cnpj.invalid.check.digit"

    # Base64 encoded files
    BASE64_FILE_INVALID_FORMAT: Final[str] = "msg.validation.request.field.base64file.invalid.format"
    BASE64_FILE_INVALID_CONTENT: Final[str] = "msg.validation.request.field.base64file.invalid.content"
    BASE64_FILE_INVALID_SIZE: Final[str] = "msg.validation.request.field.base64file.invalid.size"
    BASE64_FILE_INVALID_DETECTED_TYPE: Final[str] = (
        "msg.validation.request.field.base64file.invalid.detected.type"
    )
    BASE64_FILE_INVALID_GENERAL: Final[str] = "msg.validation.request.field.base64file.invalid.general"
    BASE64_FILE_INVALID_LIST: Final[str] = "msg.validation.request.field.base64file.invalid.list"
    BASE64_FILE_MAX_FILE_COUNT: Final[str] = "msg.validation.request.field.base64file.max.file.count"
    BASE64_FILE_MAX_TOTAL_SIZE: Final[str] = "msg.validation.request.field.base64file.max.total.size"
    BASE64_FILE_DUPLICATE_FILE: Final[str] = "msg.validation.request.field.base64file.duplicate.file"

    # Base64 encoded images
    BASE64_IMAGE_INVALID_FORMAT: Final[str] = "msg.validation.request.field.base64image.invalid.format"
    BASE64_IMAGE_INVALID_CONTENT: Final[str] = "msg.validation.request.field.base64image.invalid.content"

    # Named file maps
    MISSING_FILENAME: Final[str] = "msg.validation.request.field.missing.filename"
    MISSING_BASE64_CONTENT: Final[str] = "msg.validation.request.field.missing.base64content"
    INVALID_FILENAME: Final[str] = "msg.validation.request.field.invalid.filename"
    UNSUPPORTED_FILE_TYPE: Final[str] = "msg.validation.request.field.unsupported.filetype"
    INVALID_EXTENSION: Final[str] = "msg.validation.request.field.invalid.extension"
    EXTENSION_MISMATCH: Final[str] = "msg.validation.request.field.extension.mismatch"

    # Direct uploads
    UPLOAD_INVALID_EXTENSION: Final[str] = "msg.validation.request.field.multipartfile.invalid.extension"
    UPLOAD_INVALID_TYPE: Final[str] = "msg.validation.request.field.multipartfile.invalid.type"
    UPLOAD_INVALID_SIZE: Final[str] = "msg.validation.request.field.multipartfile.invalid.size"
    UPLOAD_INVALID_LIST: Final[str] = "msg.validation.request.field.multipartfile.invalid.list"
    UPLOAD_MAX_FILE_COUNT: Final[str] = "msg.validation.request.field.multipartfile.max.file.count"
    UPLOAD_MAX_TOTAL_SIZE: Final[str] = "msg.validation.request.field.multipartfile.max.total.size"
    UPLOAD_DUPLICATE_FILE: Final[str] = "msg.validation.request.field.multipartfile.duplicate.file"

    # Enums
    ENUM_INVALID_CODE: Final[str] = "msg.validation.request.field.enum.invalid.code"
    ENUM_INVALID_CODE_HIDDEN: Final[str] = "msg.validation.request.field.enum.invalid.code.hidden"
    ENUM_INVALID_VALUE: Final[str] = "msg.validation.request.field.enum.invalid.value"
    ENUM_INVALID_VALUE_HIDDEN: Final[str] = "msg.validation.request.field.enum.invalid.value.hidden"
    ENUM_CODE_ACCESSOR_MISSING: Final[str] = "msg.validation.request.field.enum.code.error.access.method"
    ENUM_ACCESSOR_INVOCATION: Final[str] = "msg.validation.request.field.enum.error.accessor.invocation"

    # Date ranges
    DATE_RANGE_EMPTY: Final[str] = "msg.validation.request.field.date.range.empty"
    DATE_RANGE_INVALID: Final[str] = "msg.validation.request.field.date.range.invalid"
    DATE_RANGE_UNSUPPORTED_TYPE: Final[str] = "msg.validation.request.field.date.range.unsupported.type"
    DATE_RANGE_FIELD_ACCESS: Final[str] = "msg.validation.request.field.date.range.field.access"
    DATE_RANGE_ERROR: Final[str] = "msg.validation.request.field.date.range.error"

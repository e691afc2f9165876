"""Validators for request fields.

Every validator follows the same host contract: construct it, call
``initialize(options)`` once, then call ``is_valid(value, sink)`` from any
number of threads. ``create_*`` factories do the first two steps.
"""

from .document_number_validator import (
    DocumentNumberValidator,
    calculate_check_digit,
    create_document_number_validator,
    is_valid_cnpj,
    is_valid_cpf,
)
from .base64_file_validator import Base64FileValidator, FileInspection, create_base64_file_validator
from .base64_image_validator import Base64ImageValidator, create_base64_image_validator
from .base64_file_list_validator import Base64FileListValidator, create_base64_file_list_validator
from .base64_file_map_validator import (
    Base64FileMapValidator,
    create_base64_file_map_validator,
    is_valid_file_name,
)
from .upload_file_validator import UploadFileValidator, create_upload_file_validator
from .upload_file_list_validator import UploadFileListValidator, create_upload_file_list_validator
from .enum_accessor import EnumAccessorSupport, EnumValidationOptions, sort_valid_values
from .enum_code_validator import EnumCodeValidator, create_enum_code_validator
from .enum_value_validator import EnumValueValidator, create_enum_value_validator
from .date_range_validator import (
    DateRangeOptions,
    DateRangeValidator,
    create_date_range_validator,
    field_display_name,
)

__all__ = [
    # Document numbers
    "DocumentNumberValidator",
    "calculate_check_digit",
    "create_document_number_validator",
    "is_valid_cnpj",
    "is_valid_cpf",

    # Encoded files
    "Base64FileValidator",
    "FileInspection",
    "create_base64_file_validator",
    "Base64ImageValidator",
    "create_base64_image_validator",
    "Base64FileListValidator",
    "create_base64_file_list_validator",
    "Base64FileMapValidator",
    "create_base64_file_map_validator",
    "is_valid_file_name",

    # Uploads
    "UploadFileValidator",
    "create_upload_file_validator",
    "UploadFileListValidator",
    "create_upload_file_list_validator",

    # Enums
    "EnumAccessorSupport",
    "EnumValidationOptions",
    "sort_valid_values",
    "EnumCodeValidator",
    "create_enum_code_validator",
    "EnumValueValidator",
    "create_enum_value_validator",

    # Date ranges
    "DateRangeOptions",
    "DateRangeValidator",
    "create_date_range_validator",
    "field_display_name",
]

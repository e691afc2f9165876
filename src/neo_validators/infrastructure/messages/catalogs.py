"""Bundled message catalogs.

Templates use positional ``{0}`` placeholders. Each catalog maps every key
in MessageKeys to the text of one locale.
"""

from typing import Dict

from ...config.constants import MessageKeys, SupportedLocales

EN_US_MESSAGES: Dict[str, str] = {
    # Document numbers
    MessageKeys.CPF_CNPJ_INVALID: "The CPF/CNPJ must contain only numbers.",
    MessageKeys.CPF_CNPJ_INVALID_LENGTH: "The CPF must have 11 digits and the CNPJ must have 14 digits.",
    MessageKeys.CPF_INVALID_CHECK_DIGIT: "Invalid CPF: the check digits do not match.",
    MessageKeys.CNPJ_INVALID_CHECK_DIGIT: "Invalid CNPJ: the check digits do not match.",

    # Encoded files
    MessageKeys.BASE64_FILE_INVALID_FORMAT: (
        "Invalid file format. Expected data:<type>/<subtype>;base64,<content>."
    ),
    MessageKeys.BASE64_FILE_INVALID_CONTENT: "The file content is not valid Base64.",
    MessageKeys.BASE64_FILE_INVALID_SIZE: (
        "The file size ({0} MB) exceeds the maximum allowed size of {1} MB."
    ),
    MessageKeys.BASE64_FILE_INVALID_DETECTED_TYPE: (
        "The detected file type ({0}) is not allowed. Allowed types: {1}."
    ),
    MessageKeys.BASE64_FILE_INVALID_GENERAL: (
        "The file could not be validated. Please try again or use a different file."
    ),
    MessageKeys.BASE64_FILE_INVALID_LIST: "Invalid file at position {0}: {1}",
    MessageKeys.BASE64_FILE_MAX_FILE_COUNT: "The maximum number of files allowed is {0}.",
    MessageKeys.BASE64_FILE_MAX_TOTAL_SIZE: (
        "The total size of the files ({0} MB) exceeds the maximum allowed total of {1} MB."
    ),
    MessageKeys.BASE64_FILE_DUPLICATE_FILE: "Duplicate file found at position {0}.",

    # Encoded images
    MessageKeys.BASE64_IMAGE_INVALID_FORMAT: (
        "Invalid image format. Expected data:image/<type>;base64,<content>."
    ),
    MessageKeys.BASE64_IMAGE_INVALID_CONTENT: "The image content is not valid Base64.",

    # Named file maps
    MessageKeys.MISSING_FILENAME: "The file name is missing at position {0}.",
    MessageKeys.MISSING_BASE64_CONTENT: "The content of file {0} at position {1} is missing.",
    MessageKeys.INVALID_FILENAME: "Invalid file name {0} at position {1}.",
    MessageKeys.UNSUPPORTED_FILE_TYPE: "The file at position {0} has an unsupported type ({1}).",
    MessageKeys.INVALID_EXTENSION: "The file {0} has an unknown extension ({1}) at position {2}.",
    MessageKeys.EXTENSION_MISMATCH: (
        "The extension of file {0} ({1}) does not match its content, expected {2} at position {3}."
    ),

    # Direct uploads
    MessageKeys.UPLOAD_INVALID_EXTENSION: (
        "The file extension ({0}) does not match the detected file type ({1})."
    ),
    MessageKeys.UPLOAD_INVALID_TYPE: "The file type ({0}) is not allowed. Allowed types: {1}.",
    MessageKeys.UPLOAD_INVALID_SIZE: (
        "The file size ({0} MB) exceeds the maximum allowed size of {1} MB."
    ),
    MessageKeys.UPLOAD_INVALID_LIST: "Invalid file at position {0}: {1}",
    MessageKeys.UPLOAD_MAX_FILE_COUNT: "The maximum number of files allowed is {0}.",
    MessageKeys.UPLOAD_MAX_TOTAL_SIZE: (
        "The total size of the files ({0} MB) exceeds the maximum allowed total of {1} MB."
    ),
    MessageKeys.UPLOAD_DUPLICATE_FILE: "Duplicate file name {0} at position {1}.",

    # Enums
    MessageKeys.ENUM_INVALID_CODE: "Invalid code: {0}. Valid codes: {1}.",
    MessageKeys.ENUM_INVALID_CODE_HIDDEN: "Invalid code: {0}.",
    MessageKeys.ENUM_INVALID_VALUE: "Invalid value: {0}. Valid values: {1}.",
    MessageKeys.ENUM_INVALID_VALUE_HIDDEN: "Invalid value: {0}.",
    MessageKeys.ENUM_CODE_ACCESSOR_MISSING: "The enum {0} does not provide the required '{1}' accessor.",
    MessageKeys.ENUM_ACCESSOR_INVOCATION: "The '{0}' accessor of enum {1} could not be read.",

    # Date ranges
    MessageKeys.DATE_RANGE_EMPTY: "{0} and {1} must both be filled or both be empty.",
    MessageKeys.DATE_RANGE_INVALID: "{0} must be before or equal to {1}.",
    MessageKeys.DATE_RANGE_UNSUPPORTED_TYPE: "Unsupported date type ({0}) in field {1}.",
    MessageKeys.DATE_RANGE_FIELD_ACCESS: "The field {0} could not be read from {1}.",
    MessageKeys.DATE_RANGE_ERROR: "The date range could not be validated.",
}

PT_BR_MESSAGES: Dict[str, str] = {
    # Document numbers
    MessageKeys.CPF_CNPJ_INVALID: "O CPF/CNPJ deve conter apenas números.",
    MessageKeys.CPF_CNPJ_INVALID_LENGTH: "O CPF deve ter 11 dígitos e o CNPJ deve ter 14 dígitos.",
    MessageKeys.CPF_INVALID_CHECK_DIGIT: "CPF inválido: os dígitos verificadores não conferem.",
    MessageKeys.CNPJ_INVALID_CHECK_DIGIT: "CNPJ inválido: os dígitos verificadores não conferem.",

    # Encoded files
    MessageKeys.BASE64_FILE_INVALID_FORMAT: (
        "Formato de arquivo inválido. Esperado data:<tipo>/<subtipo>;base64,<conteúdo>."
    ),
    MessageKeys.BASE64_FILE_INVALID_CONTENT: "O conteúdo do arquivo não é um Base64 válido.",
    MessageKeys.BASE64_FILE_INVALID_SIZE: (
        "O tamanho do arquivo ({0} MB) excede o tamanho máximo permitido de {1} MB."
    ),
    MessageKeys.BASE64_FILE_INVALID_DETECTED_TYPE: (
        "O tipo de arquivo detectado ({0}) não é permitido. Tipos permitidos: {1}."
    ),
    MessageKeys.BASE64_FILE_INVALID_GENERAL: (
        "Não foi possível validar o arquivo. Tente novamente ou utilize outro arquivo."
    ),
    MessageKeys.BASE64_FILE_INVALID_LIST: "Arquivo inválido na posição {0}: {1}",
    MessageKeys.BASE64_FILE_MAX_FILE_COUNT: "O número máximo de arquivos permitido é {0}.",
    MessageKeys.BASE64_FILE_MAX_TOTAL_SIZE: (
        "O tamanho total dos arquivos ({0} MB) excede o total máximo permitido de {1} MB."
    ),
    MessageKeys.BASE64_FILE_DUPLICATE_FILE: "Arquivo duplicado encontrado na posição {0}.",

    # Encoded images
    MessageKeys.BASE64_IMAGE_INVALID_FORMAT: (
        "Formato de imagem inválido. Esperado data:image/<tipo>;base64,<conteúdo>."
    ),
    MessageKeys.BASE64_IMAGE_INVALID_CONTENT: "O conteúdo da imagem não é um Base64 válido.",

    # Named file maps
    MessageKeys.MISSING_FILENAME: "O nome do arquivo está ausente na posição {0}.",
    MessageKeys.MISSING_BASE64_CONTENT: "O conteúdo do arquivo {0} na posição {1} está ausente.",
    MessageKeys.INVALID_FILENAME: "Nome de arquivo inválido {0} na posição {1}.",
    MessageKeys.UNSUPPORTED_FILE_TYPE: "O arquivo na posição {0} possui um tipo não suportado ({1}).",
    MessageKeys.INVALID_EXTENSION: "O arquivo {0} possui uma extensão desconhecida ({1}) na posição {2}.",
    MessageKeys.EXTENSION_MISMATCH: (
        "A extensão do arquivo {0} ({1}) não corresponde ao seu conteúdo, esperado {2} na posição {3}."
    ),

    # Direct uploads
    MessageKeys.UPLOAD_INVALID_EXTENSION: (
        "A extensão do arquivo ({0}) não corresponde ao tipo de arquivo detectado ({1})."
    ),
    MessageKeys.UPLOAD_INVALID_TYPE: "O tipo de arquivo ({0}) não é permitido. Tipos permitidos: {1}.",
    MessageKeys.UPLOAD_INVALID_SIZE: (
        "O tamanho do arquivo ({0} MB) excede o tamanho máximo permitido de {1} MB."
    ),
    MessageKeys.UPLOAD_INVALID_LIST: "Arquivo inválido na posição {0}: {1}",
    MessageKeys.UPLOAD_MAX_FILE_COUNT: "O número máximo de arquivos permitido é {0}.",
    MessageKeys.UPLOAD_MAX_TOTAL_SIZE: (
        "O tamanho total dos arquivos ({0} MB) excede o total máximo permitido de {1} MB."
    ),
    MessageKeys.UPLOAD_DUPLICATE_FILE: "Nome de arquivo duplicado {0} na posição {1}.",

    # Enums
    MessageKeys.ENUM_INVALID_CODE: "Código inválido: {0}. Códigos válidos: {1}.",
    MessageKeys.ENUM_INVALID_CODE_HIDDEN: "Código inválido: {0}.",
    MessageKeys.ENUM_INVALID_VALUE: "Valor inválido: {0}. Valores válidos: {1}.",
    MessageKeys.ENUM_INVALID_VALUE_HIDDEN: "Valor inválido: {0}.",
    MessageKeys.ENUM_CODE_ACCESSOR_MISSING: "O enum {0} não possui o acessor obrigatório '{1}'.",
    MessageKeys.ENUM_ACCESSOR_INVOCATION: "Não foi possível ler o acessor '{0}' do enum {1}.",

    # Date ranges
    MessageKeys.DATE_RANGE_EMPTY: "{0} e {1} devem ser ambos preenchidos ou ambos vazios.",
    MessageKeys.DATE_RANGE_INVALID: "{0} deve ser anterior ou igual a {1}.",
    MessageKeys.DATE_RANGE_UNSUPPORTED_TYPE: "Tipo de data não suportado ({0}) no campo {1}.",
    MessageKeys.DATE_RANGE_FIELD_ACCESS: "Não foi possível ler o campo {0} de {1}.",
    MessageKeys.DATE_RANGE_ERROR: "Não foi possível validar o intervalo de datas.",
}

MESSAGE_CATALOGS: Dict[str, Dict[str, str]] = {
    SupportedLocales.EN_US: EN_US_MESSAGES,
    SupportedLocales.PT_BR: PT_BR_MESSAGES,
}

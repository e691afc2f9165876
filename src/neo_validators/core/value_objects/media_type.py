"""Media type to file extension table.

ONLY media type lookups - a fixed, closed mapping between media types and
their canonical file extensions, used to check that a file name agrees with
the content it carries.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum
from typing import Optional


class MediaTypeExtension(Enum):
    """Known media types and their canonical extension."""

    # Images
    JPEG = ("image/jpeg", "jpg")
    PNG = ("image/png", "png")
    GIF = ("image/gif", "gif")
    BMP = ("image/bmp", "bmp")
    WEBP = ("image/webp", "webp")
    TIFF = ("image/tiff", "tiff")
    ICON = ("image/x-icon", "ico")

    # Texts
    PLAIN = ("text/plain", "txt")
    CSV = ("text/csv", "csv")
    JSON = ("application/json", "json")
    YAML = ("application/x-yaml", "yaml")
    HTML = ("text/html", "html")
    CSS = ("text/css", "css")
    XML = ("application/xml", "xml")
    MARKDOWN = ("text/markdown", "md")

    # Archives
    ZIP = ("application/zip", "zip")
    SEVEN_ZIP = ("application/x-7z-compressed", "7z")
    RAR = ("application/x-rar-compressed", "rar")
    TAR = ("application/x-tar", "tar")
    GZIP = ("application/gzip", "gz")
    BZIP2 = ("application/x-bzip2", "bz2")
    LZMA = ("application/x-lzma", "lzma")
    ZSTD = ("application/zstd", "zst")

    # Audio
    MP3 = ("audio/mpeg", "mp3")
    WAV = ("audio/wav", "wav")
    AAC = ("audio/aac", "aac")
    OGG = ("audio/ogg", "ogg")
    FLAC = ("audio/flac", "flac")
    AIFF = ("audio/aiff", "aiff")
    MID = ("audio/midi", "mid")

    # Video
    MP4 = ("video/mp4", "mp4")
    AVI = ("video/x-msvideo", "avi")
    WMV = ("video/x-ms-wmv", "wmv")
    WEBM = ("video/webm", "webm")
    MOV = ("video/quicktime", "mov")
    MKV = ("video/x-matroska", "mkv")
    FLV = ("video/x-flv", "flv")
    MPEG = ("video/mpeg", "mpeg")

    # Documents
    PDF = ("application/pdf", "pdf")
    DOC = ("application/msword", "doc")
    PPT = ("application/vnd.ms-powerpoint", "ppt")
    DOCX = ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "docx")
    XLSX = ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx")
    PPTX = ("application/vnd.openxmlformats-officedocument.presentationml.presentation", "pptx")

    # Source code
    JAVASCRIPT = ("application/javascript", "js")
    PYTHON = ("text/x-python", "py")
    JAVA = ("text/x-java-source", "java")
    KOTLIN = ("text/x-kotlin", "kt")
    SCALA = ("text/x-scala", "scala")
    TYPESCRIPT = ("application/x-typescript", "ts")
    PHP = ("application/x-httpd-php", "php")
    RUBY = ("text/x-ruby", "rb")
    C = ("text/x-c", "c")
    CPP = ("text/x-c++", "cpp")
    CSHARP = ("text/x-csharp", "cs")
    GO = ("text/x-go", "go")
    RUST = ("text/x-rust", "rs")
    SWIFT = ("text/x-swift", "swift")
    PERL = ("text/x-perl", "pl")
    LUA = ("text/x-lua", "lua")

    def __init__(self, media_type: str, extension: str):
        self.media_type = media_type
        self.extension = extension

    @classmethod
    def extension_for(cls, media_type: Optional[str]) -> Optional[str]:
        """Get the canonical extension for a media type, or None if unmapped."""
        if not media_type:
            return None
        for member in cls:
            if member.media_type == media_type:
                return member.extension
        return None

    @classmethod
    def is_known_extension(cls, extension: Optional[str]) -> bool:
        """Check whether an extension (case-insensitive) appears in the table."""
        if not extension:
            return False
        extension = extension.lower()
        return any(member.extension == extension for member in cls)


def extract_extension(file_name: Optional[str]) -> Optional[str]:
    """Extract the text after the last dot of a file name, or None."""
    if not file_name or "." not in file_name:
        return None
    return file_name.rsplit(".", 1)[1]

from .content import FrontMatter, extract_front_matter
from .converter import DocConverter
from .errors import ConfigError, ConversionFailure, InvalidArgument, InvalidTemplate, IOFailure, RemarqError
from .generator import FileEntry, Generator

__all__ = [
    "ConfigError",
    "ConversionFailure",
    "DocConverter",
    "FileEntry",
    "FrontMatter",
    "Generator",
    "InvalidArgument",
    "InvalidTemplate",
    "IOFailure",
    "RemarqError",
    "extract_front_matter",
]

from __future__ import annotations


class RemarqError(Exception):
    pass


class InvalidArgument(RemarqError, ValueError):
    pass


class InvalidTemplate(InvalidArgument):
    pass


class ConfigError(RemarqError):
    pass


class ConversionFailure(RemarqError):
    def __init__(self, name: str, reason: object) -> None:
        super().__init__(f"Failed to convert {name}: {reason}")
        self.name = name


class IOFailure(RemarqError, OSError):
    def __init__(self, path: object, reason: object) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path

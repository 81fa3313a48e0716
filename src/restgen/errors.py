from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every failure that aborts a generation run."""


class CatalogError(GeneratorError):
    pass


class FormatError(GeneratorError):
    pass


class OutputWriteError(GeneratorError):
    pass


class ConfigError(GeneratorError):
    pass

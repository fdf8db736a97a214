"""Exception hierarchy for bulletin operations."""


class BulletinError(Exception):
    """Base exception for bulletin operations."""

    pass


class FatalParseError(BulletinError):
    """An event fragment appeared before any date fragment."""

    pass


class ConfigurationMissingError(BulletinError):
    """A skip-list configuration file is missing."""

    pass


class UnsupportedFormatError(BulletinError):
    """File format not supported."""

    pass


class IngestionError(BulletinError):
    """Error reading the calendar data document."""

    pass


class ExportError(BulletinError):
    """Error writing the output document."""

    pass

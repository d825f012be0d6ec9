"""Sessalias custom exceptions."""


class SessaliasError(Exception):
    """Base exception for Sessalias errors."""


class StorageError(SessaliasError):
    """The alias database could not be written."""

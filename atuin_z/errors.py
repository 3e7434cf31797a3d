"""Errors raised by the collaborators around the ranking core."""

from __future__ import annotations


class AtuinZError(RuntimeError):
    """Base class. Unrecoverable for a single invocation."""


class DatastoreError(AtuinZError):
    """History database missing, unreadable, or not shaped like Atuin's."""


class ExclusionsError(AtuinZError):
    """Exclusion file could not be read or written."""


class HomeDirError(AtuinZError):
    """Home directory could not be determined."""

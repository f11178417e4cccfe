"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class JWTError(UtilError):
    """JWT-related error."""

    pass

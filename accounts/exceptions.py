"""Errors raised by the credential store."""


class CredentialError(Exception):
    """Base class for registration and login failures."""

    default_message = 'Authentication failed.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateIdentity(CredentialError):
    default_message = 'A user with the given username is already registered.'


class InvalidCredentials(CredentialError):
    default_message = 'Password or username is incorrect.'

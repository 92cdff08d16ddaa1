# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig errors / exception classes.
"""

import sys


class Error(Exception):
    """Base class for rightsconfig errors.

    The message may be given as str, bytes (utf-8) or any object that
    supports __str__, e.g. a lazy translated string.
    """

    def __init__(self, message):
        """Initialize an error, decode if needed

        :param message: str, bytes or object that supports __str__.
        """
        if isinstance(message, bytes):
            message = message.decode()
        if not isinstance(message, str):
            message = str(message)
        self.message = message

    def __str__(self):
        """Return the error message as str."""
        return self.message

    def __getitem__(self, item):
        """Make it possible to access attributes like a dict"""
        return getattr(self, item)


class CompositeError(Error):
    """Base class for exceptions containing another exception.

    Do not use this class directly; use its more specific subclasses.

    When showing a traceback, both the outer error and the error that was
    being handled while it got raised are available.
    """

    def __init__(self, message):
        """Save system exception info before this exception is raised."""
        Error.__init__(self, message)
        self.innerException = sys.exc_info()

    def exceptions(self):
        """Return a list of all inner exceptions"""
        all = [self.innerException]
        while True:
            lastException = all[-1][1]
            try:
                all.append(lastException.innerException)
            except AttributeError:
                break
        return all


class FatalError(CompositeError):
    """Base class for fatal errors we can't handle.

    Do not use this class directly; use its more specific subclasses.
    """


class ConfigurationError(FatalError):
    """Raised when a fatal misconfiguration is found."""


class UnknownControlError(ConfigurationError):
    """Raised when a rights form contains a control of unknown type.

    This is a bug in the application that registered the control, so it
    must not be hidden from the admin rendering the form.
    """

    def __init__(self, control_type):
        ConfigurationError.__init__(self, f"Unknown control: {control_type}")
        self.control_type = control_type

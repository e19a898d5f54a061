"""Numeric process exit codes for the ``httpauth`` command line.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~httpauth.exceptions.HttpAuthError` subclass.
Shell scripts can inspect the exit code to tell a rejected credential from
a usage mistake without parsing stderr.

Example::

    $ httpauth basic decode "Bearer abc123"
    $ echo $?
    3   # EXIT_BAD_CREDENTIALS -- the header was not valid Basic auth
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or produced an invalid header."""

EXIT_BAD_CREDENTIALS = 3
"""The supplied header or credentials could not be decoded."""

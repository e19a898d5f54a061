"""Built-in CLI sub-commands for httpauth.

* :mod:`~httpauth.commands.basic` -- encode and decode Basic credentials.
* :mod:`~httpauth.commands.challenge` -- print a ``WWW-Authenticate`` value.
* :mod:`~httpauth.commands.config` -- view and modify global settings.
"""

"""Challenge command -- print a ``WWW-Authenticate`` value for a 401 response."""

from __future__ import annotations

from typing import Optional

import typer

from httpauth.exceptions import HttpAuthError
from httpauth.output import emit_header, error


def challenge_command(
    ctx: typer.Context,
    realm: Optional[str] = typer.Option(
        None, "--realm", "-r", help="Protection space name (defaults to config 'default_realm')."
    ),
    scheme: str = typer.Option("Basic", "--scheme", help="Authentication scheme token."),
) -> None:
    """Print the ``WWW-Authenticate`` header a server sends with a 401.

    Example::

        httpauth challenge --realm admin
        # Basic realm="admin", charset="UTF-8"
    """
    from httpauth.auth import AuthenticationScheme, WwwAuthenticate
    from httpauth.headers import validate_header_value

    config = (ctx.obj or {}).get("config")
    if realm is None:
        realm = config.default_realm if config is not None else "Restricted"

    try:
        challenge = WwwAuthenticate(scheme=AuthenticationScheme.parse(scheme), realm=realm)
        value = validate_header_value(challenge.header_value())
    except HttpAuthError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    emit_header(challenge.header_name(), value)

"""Config commands -- view and modify the global configuration.

Provides the ``httpauth config`` sub-command group for reading and updating
the user's :class:`~httpauth.models.GlobalConfig` file.
"""

from __future__ import annotations

import typer

from httpauth.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)

_SETTABLE_KEYS = ("output.format", "default_realm")


@config_app.command("show")
def config_show() -> None:
    """Show the stored configuration.

    Example::

        httpauth config show --json
    """
    from httpauth.config import get_config_dir, load_global_config
    from httpauth.exceptions import ConfigError

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Config key: output.format or default_realm."),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    The updated config is validated against
    :class:`~httpauth.models.GlobalConfig` before saving.

    Raises:
        typer.Exit: With code 2 if the key is unknown or the value is invalid.

    Example::

        httpauth config set output.format json
        httpauth config set default_realm admin
    """
    from httpauth.config import load_global_config, save_global_config
    from httpauth.exceptions import ConfigError
    from httpauth.models import GlobalConfig

    if key not in _SETTABLE_KEYS:
        error(f"Invalid config key: {key} (expected one of: {', '.join(_SETTABLE_KEYS)})")
        raise typer.Exit(code=2)

    try:
        data = load_global_config().model_dump(mode="json")
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if key == "output.format":
        data["output"]["format"] = value
    else:
        data[key] = value

    try:
        updated = GlobalConfig.model_validate(data)
    except ValueError as exc:
        error(f"Invalid value for {key}: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(updated)
    success(f"Set {key} = {value}")

import sys
from pathlib import Path
from typing import Optional

import typer
import typer_di

from arnav_core import log
from arnav_core.config import load_config, set_config
from arnav_core.errors import ConfigError
from arnav_core.models import AwsIdentityError

from . import commands
from .commands.console import BOLD, RED, RESET
from .version import version_callback


app = typer_di.TyperDI(help="Navegue por recursos AWS a partir de ARNs.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Arquivo de config YAML (default: ~/.config/arnav/config.yaml ou $ARNAV_CONFIG).",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Liga o log de debug nesse arquivo.",
    ),
) -> None:
    try:
        cfg = load_config(config)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e

    set_config(cfg)

    target_log = log_file or cfg.log_file
    if target_log:
        log.enable_file(target_log)


app.command("parse")(commands.parse)
app.command("resolve")(commands.resolve)
app.command("daos")(commands.daos)
app.command("get")(commands.get)
app.command("ls")(commands.ls)
app.command("action")(commands.action)
app.command("whoami")(commands.whoami)
app.command("profiles")(commands.profiles)


def run() -> None:
    """
    Entry point do console script: falha de identidade AWS vira mensagem + exit 1.
    """
    try:
        app()
    except AwsIdentityError as e:
        print(f"{RED}{BOLD}FAILED TO RESOLVE AWS IDENTITY:{RESET} {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()

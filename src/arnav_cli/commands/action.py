from typing import Optional

import typer
import typer_di
from botocore.exceptions import BotoCoreError, ClientError

from arnav_core.actions import run_action
from arnav_core.arn import parse_arn
from arnav_core.aws_errors import to_arnav_error
from arnav_core.config import get_config
from arnav_core.engine.identity_engine import new_session, requires_aws_identity
from arnav_core.errors import ActionError, ArnavError
from arnav_core.navigation import fetch

from .console import BOLD, GREEN, MAGENTA, RED, RESET, RULE, emit_structured, print_error
from ..params import output_params


@requires_aws_identity
def action(
    arn: str = typer.Argument(
        ...,
        help="ARN do recurso alvo.",
    ),
    name: str = typer.Argument(
        ...,
        help="Nome da ação configurada para o tipo de recurso.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Só mostra o comando expandido, sem executar.",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Não pede confirmação para ações com confirm: true.",
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS profile name (from ~/.aws/config).",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region. Default: a região do próprio ARN.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Executa uma ação configurada (comando shell com variáveis do recurso).
    """
    cfg = get_config()
    parsed = parse_arn(arn)
    try:
        session = new_session(profile=profile, region=region or (parsed.region if parsed else None))
        target, resource = fetch(arn, session)

        spec = next((a for a in cfg.actions_for(target.service, target.resource_type) if a.name == name), None)
        if spec is None:
            raise ActionError(f"Ação '{name}' não configurada para {target.key}.")

        if spec.confirm and not dry_run and not yes:
            typer.confirm(f"Executar '{spec.name}' em {resource.name or resource.id}?", abort=True)

        result = run_action(spec, resource, target, dry_run=dry_run, read_only=cfg.read_only)
    except ArnavError as e:
        print_error(e, output)
    except (ClientError, BotoCoreError) as e:
        print_error(to_arnav_error(e), output)

    payload = {"action": name, "success": result.success, "message": result.message, "command": result.command}
    if emit_structured(payload, output):
        if not result.success:
            raise typer.Exit(code=1)
        return

    print()
    print(RULE)
    if dry_run:
        print(f"{MAGENTA}{BOLD}DRY RUN —{RESET} {result.command}")
    elif result.success:
        print(f"{GREEN}{BOLD}OK:{RESET} {result.command}")
    else:
        print(f"{RED}{BOLD}FAILED ({result.message}):{RESET} {result.command}")
    print(RULE)
    print()

    if not result.success:
        raise typer.Exit(code=1)

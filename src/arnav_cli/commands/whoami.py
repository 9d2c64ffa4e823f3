from dataclasses import asdict
from typing import Optional

import typer
import typer_di

from arnav_core.engine.identity_engine import get_current_aws_identity
from arnav_core.models import AwsIdentity, AwsIdentityError

from .console import BOLD, CYAN, GREEN, GREY, MAGENTA, RED, RESET, RULE, YELLOW, emit_structured
from ..params import output_params


def _print_identity(
    identity: Optional[AwsIdentity],
    error: Optional[Exception],
    output: str,
) -> None:
    if error:
        if emit_structured({"error": str(error)}, output):
            raise typer.Exit(code=1)

        print()
        print(RULE)
        print(f"{RED}{BOLD}FAILED TO RESOLVE AWS IDENTITY{RESET}")
        print(RULE)
        print()
        print(f"{MAGENTA}Detalhes:{RESET}")
        print(f"  {error}")
        print()
        print(f"{YELLOW}Verifique se:{RESET}")
        print("  - O AWS_PROFILE está configurado corretamente")
        print("  - O login SSO está ativo (ex.: `aws sso login`)")
        print("  - As variáveis de ambiente de credenciais estão corretas")
        print("  - A role tem permissão para `sts:GetCallerIdentity`")
        print()
        print(RULE)
        raise typer.Exit(code=1)

    # Sucesso: identidade nunca deveria ser None aqui
    assert identity is not None

    if emit_structured(asdict(identity), output):
        return

    profile = identity.profile or "(no profile / env creds)"
    region = identity.region or "(no default region)"

    print()
    print(RULE)
    print(f"{CYAN}{BOLD}ARNAV — AWS Identity Context{RESET}")
    print(RULE)
    print(f"{CYAN}{BOLD}ACCOUNT:{RESET} {identity.account}")
    print(f"{CYAN}{BOLD}ARN:    {RESET} {identity.arn}")
    print(f"{CYAN}{BOLD}PROFILE:{RESET} {profile}")
    print(f"{CYAN}{BOLD}REGION: {RESET} {region}")
    print(RULE)
    print(f"{GREEN}{BOLD}Identity OK.{RESET}")
    print(GREY + "─────────────────────────────────────────────" + RESET)
    print()


def whoami(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS profile name (from ~/.aws/config).",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region, e.g. sa-east-1.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Mostra a identidade AWS atual (Account ID, User ARN).
    """
    identity = None
    err = None

    try:
        identity = get_current_aws_identity(profile=profile, region=region)
    except AwsIdentityError as e:
        err = e

    _print_identity(identity, err, output)

import logging
import subprocess
from typing import Dict

from jinja2 import Environment, StrictUndefined
from jinja2.exceptions import UndefinedError

from .errors import ActionError, EmptyCommandError, ReadOnlyError, UnsafeValueError
from .models import ActionResult, ActionSpec, NavigationTarget, Resource


logger = logging.getLogger(__name__)

env = Environment(undefined=StrictUndefined)

# Caracteres que permitiriam injetar comandos no shell
UNSAFE_CHARS = frozenset(";|&$`\\\"'<>(){}\n\r")


def action_variables(resource: Resource, target: NavigationTarget) -> Dict[str, str]:
    return {
        "id": resource.id,
        "name": resource.name or resource.id,
        "arn": resource.arn or target.arn,
        "region": target.region,
        "account": target.arn.split(":")[4] if target.arn.count(":") >= 4 else "",
        "service": target.service,
        "resource_type": target.resource_type,
        "short_id": target.short_id,
    }


def _check_safe(name: str, value: str) -> None:
    bad = sorted({c for c in value if c in UNSAFE_CHARS})
    if bad:
        raise UnsafeValueError(
            f"Variável '{name}' contém caracteres inseguros para o shell: {''.join(bad)!r}"
        )


def expand_variables(command: str, resource: Resource, target: NavigationTarget) -> str:
    """
    Renderiza o comando (Jinja2, StrictUndefined) com as variáveis do recurso, ex.:
    "aws ssm start-session --target {{ id }}" -> "aws ssm start-session --target i-123"
    """
    variables = action_variables(resource, target)

    # só valida o que o template realmente usa
    for name, value in variables.items():
        if name in command:
            _check_safe(name, value)

    try:
        rendered = env.from_string(command).render(**variables).strip()
    except UndefinedError as e:
        raise ActionError(f"Variável desconhecida no comando: {e}") from e

    if not rendered:
        raise EmptyCommandError("Comando vazio após expandir as variáveis.")

    return rendered


def run_action(
    spec: ActionSpec,
    resource: Resource,
    target: NavigationTarget,
    *,
    dry_run: bool = False,
    read_only: bool = False,
) -> ActionResult:
    if read_only and spec.dangerous:
        raise ReadOnlyError(f"Ação '{spec.name}' bloqueada em modo read-only.")

    command = expand_variables(spec.command, resource, target)

    if dry_run:
        return ActionResult(success=True, message="dry-run", command=command)

    logger.info("executando ação %s em %s: %s", spec.name, target.key, command)

    # shell=True para suportar pipes/aspas do comando configurado;
    # os valores interpolados já passaram por _check_safe
    completed = subprocess.run(command, shell=True, check=False)

    if completed.returncode != 0:
        logger.error("ação %s falhou com código %s", spec.name, completed.returncode)
        return ActionResult(
            success=False,
            message=f"exit code {completed.returncode}",
            command=command,
        )

    return ActionResult(success=True, message="Command executed successfully", command=command)

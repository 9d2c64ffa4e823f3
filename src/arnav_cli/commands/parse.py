from typing import Any, Dict, List, Optional

import typer
import typer_di

from arnav_core.arn import (
    Arn,
    arn_string,
    can_navigate,
    extract_parent_filter,
    parse_arn,
    service_resource_type,
    short_id,
)
from arnav_core.config import get_config
from arnav_core.normalize import has_explicit_type

from .console import BOLD, CYAN, GREEN, GREY, RED, RESET, RULE, YELLOW, emit_structured
from ..params import output_params


def describe_arn(value: str, arn: Optional[Arn]) -> Dict[str, Any]:
    """
    Visão completa do motor de ARN para um valor; funciona também para
    valores inválidos (todos os campos derivados ficam vazios).
    """
    service, resource_type = service_resource_type(arn)
    filter_key, filter_value = extract_parent_filter(arn)
    account_id = arn.account_id if arn else ""
    cfg = get_config()

    return {
        "input": value,
        "valid": arn is not None,
        "arn": arn_string(arn),
        "partition": arn.partition if arn else "",
        "service": arn.service if arn else "",
        "region": arn.region if arn else "",
        "account_id": cfg.mask_account_id(account_id),
        "resource_type": arn.resource_type if arn else "",
        "resource_id": arn.resource_id if arn else "",
        "short_id": short_id(arn),
        "canonical": {"service": service, "resource_type": resource_type},
        "navigable": can_navigate(arn),
        "explicit_type": has_explicit_type(arn.service, arn.resource_type) if arn else False,
        "parent_filter": {filter_key: cfg.mask_text(filter_value, account_id)} if filter_key else {},
    }


def _print_text(rows: List[Dict[str, Any]]) -> None:
    for row in rows:
        print()
        print(RULE)
        print(f"{CYAN}{BOLD}INPUT:{RESET} {row['input']}")
        print(RULE)

        if not row["valid"]:
            print(f"  {RED}not an ARN{RESET} {GREY}(tratado como texto){RESET}")
            continue

        for label in ("partition", "service", "region", "account_id", "resource_type", "resource_id", "short_id"):
            value = row[label] or GREY + "(empty)" + RESET
            print(f"  {label:<14} {value}")

        canonical = row["canonical"]
        nav = f"{GREEN}yes{RESET}" if row["navigable"] else f"{YELLOW}no{RESET}"
        source = "" if row["explicit_type"] else f" {GREY}(plural inferido){RESET}"
        print(f"  {'canonical':<14} {canonical['service']}/{canonical['resource_type']}{source}")
        print(f"  {'navigable':<14} {nav}")

        for key, value in row["parent_filter"].items():
            print(f"  {'parent_filter':<14} {key}={value}")
    print()


def parse(
    arns: List[str] = typer.Argument(
        ...,
        help="ARN(s) para interpretar. Nenhuma chamada AWS é feita.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Interpreta ARN(s): campos, tipo/id do recurso, par canônico, filtro do pai.
    """
    rows = [describe_arn(value, parse_arn(value)) for value in arns]

    if emit_structured(rows if len(rows) > 1 else rows[0], output):
        return

    _print_text(rows)

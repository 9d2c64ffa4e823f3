from typing import List

import typer
import typer_di

from arnav_core.config import get_config
from arnav_core.dao import get_dao_for
from arnav_core.errors import DaoNotFoundError
from arnav_core.navigation import resolve as resolve_target

from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE, YELLOW, emit_structured
from ..params import output_params


def resolve(
    arns: List[str] = typer.Argument(
        ...,
        help="ARN(s) para resolver em destino de navegação.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Mostra para qual DAO (service/resource_type) cada ARN navega e com qual filtro.
    """
    cfg = get_config()
    rows = []
    for value in arns:
        target = resolve_target(value)
        if target is None:
            rows.append({"input": value, "navigable": False})
            continue

        row = {"input": value, "navigable": True, **target.to_dict()}
        account_id = value.split(":")[4]
        row["filters"] = {k: cfg.mask_text(v, account_id) for k, v in target.filters.items()}
        try:
            row["dao"] = get_dao_for(target.service, target.resource_type).__name__
        except DaoNotFoundError:
            row["dao"] = None
        rows.append(row)

    if emit_structured(rows if len(rows) > 1 else rows[0], output):
        return

    for row in rows:
        print()
        print(f"{CYAN}{BOLD}{row['input']}{RESET}")
        if not row["navigable"]:
            print(f"  {YELLOW}not navigable{RESET}")
            continue

        dao = row["dao"] or GREY + "(sem DAO registrado)" + RESET
        print(f"  {GREEN}→{RESET} {row['service']}/{row['resource_type']}  {GREY}id={row['resource_id']}{RESET}")
        print(f"    dao: {dao}")
        for key, value in row["filters"].items():
            print(f"    filter: {key}={value}")
    print()
    print(RULE)

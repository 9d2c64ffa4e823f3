from typing import Any, Dict, List

import typer_di

from arnav_core.dao import registered_daos

from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE, emit_structured
from ..params import output_params


def _print_daos(daos_list: List[Dict[str, Any]]) -> None:
    print()
    print(RULE)
    print(f"{CYAN}{BOLD}Registered DAOs:{RESET}")
    print(RULE)
    print()
    if not daos_list:
        print("  (none registered)")
        print()
        return

    for dao in daos_list:
        key = f"{dao['service']}/{dao['resource_type']}"
        meta_parts = [", ".join(dao["operations"])]
        if dao["parent_filter"]:
            meta_parts.append(f"requires {dao['parent_filter']}")
        meta = "; ".join(meta_parts)
        print(f"  {GREEN}•{RESET} {key:<32} {dao['name']:<34} {GREY}({meta}){RESET}")

    print()
    print(RULE)
    print()


def daos(output: str = typer_di.Depends(output_params)) -> None:
    """
    Lista todos os DAOs registrados no arnav.
    """
    daos_list = [
        {
            "name": dao.__name__,
            "service": dao.service,
            "resource_type": dao.resource_type,
            "operations": sorted(dao.operations),
            "parent_filter": dao.parent_filter,
        }
        for dao in registered_daos()
    ]

    if emit_structured(daos_list, output):
        return

    _print_daos(daos_list)

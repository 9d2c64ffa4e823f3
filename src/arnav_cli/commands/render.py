from typing import Any, Dict, Iterable

from arnav_core.models import Resource

from .console import BOLD, CYAN, GREY, RESET, RULE


def print_resource(resource: Resource, title: str) -> None:
    """
    Visão de detalhe: identificação, tags e campos escalares da resposta crua.
    """
    print()
    print(RULE)
    print(f"{CYAN}{BOLD}{title}:{RESET} {resource.name or resource.id}")
    print(RULE)
    print(f"  {'id':<24} {resource.id}")
    if resource.arn:
        print(f"  {'arn':<24} {resource.arn}")

    scalars = _scalar_fields(resource.data)
    if scalars:
        print()
        for key, value in scalars.items():
            print(f"  {key:<24} {value}")

    print()
    print(f"{CYAN}{BOLD}Tags:{RESET}")
    if resource.tags:
        max_key_len = max(len(k) for k in resource.tags)
        for key in sorted(resource.tags, key=str.lower):
            print(f"  {key:<{max_key_len}} = {resource.tags[key]}")
    else:
        print(GREY + "  (none)" + RESET)
    print()


def print_resource_table(resources: Iterable[Resource], title: str) -> int:
    print()
    print(f"{CYAN}{BOLD}{title}{RESET}")
    print(RULE)
    count = 0
    for r in resources:
        name = r.name if r.name and r.name != r.id else ""
        print(f"  {r.id:<48} {GREY}{name}{RESET}")
        count += 1
    if not count:
        print(GREY + "  (none)" + RESET)
    print(RULE)
    print(f"{GREY}{count} resource(s){RESET}")
    print()
    return count


def _scalar_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        k: v
        for k, v in data.items()
        if not isinstance(v, (dict, list)) and k != "ResponseMetadata"
    }

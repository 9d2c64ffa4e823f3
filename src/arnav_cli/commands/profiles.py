import typer_di

from arnav_core.config import get_config, list_profiles

from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE, emit_structured
from ..params import output_params


def profiles(output: str = typer_di.Depends(output_params)) -> None:
    """
    Lista os profiles de ~/.aws/credentials e ~/.aws/config.
    """
    names = list_profiles()
    current = get_config().profile or "default"

    if emit_structured({"current": current, "profiles": names}, output):
        return

    print()
    print(f"{CYAN}{BOLD}AWS Profiles:{RESET}")
    print(RULE)
    for name in names:
        marker = f"{GREEN}*{RESET}" if name == current else " "
        print(f"  {marker} {name}")
    print(RULE)
    print(f"{GREY}* profile ativo (config/--profile){RESET}")
    print()

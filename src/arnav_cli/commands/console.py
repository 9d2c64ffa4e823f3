import json
from typing import Any

import typer
import yaml


RESET = "\033[0m"
BOLD = "\033[1m"

CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
BLUE = "\033[34m"
RED = "\033[31m"
GREY = "\033[90m"

RULE = GREY + "─────────────────────────────────────────────" + RESET


def emit_structured(data: Any, output: str) -> bool:
    """
    Emite `data` em json/yaml. Devolve False quando o output é texto
    e o chamador precisa imprimir a versão colorida.
    """
    if output == "json":
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        return True

    if output == "yaml":
        typer.echo(yaml.safe_dump(_plain(data), sort_keys=False, allow_unicode=True))
        return True

    return False


def _plain(data: Any) -> Any:
    # yaml.safe_dump não sabe serializar datetime de resposta boto3 em todos os casos
    return json.loads(json.dumps(data, default=str))


def print_error(error: Exception, output: str) -> None:
    """
    Exibe o erro no formato pedido e encerra com código 1.
    """
    if emit_structured({"error": str(error)}, output):
        raise typer.Exit(code=1)

    print()
    print(RULE)
    print(f"{RED}{BOLD}ERROR:{RESET} {error}")
    print(RULE)
    print()
    raise typer.Exit(code=1)

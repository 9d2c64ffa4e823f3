from typing import List, Optional

import typer
import typer_di
from botocore.exceptions import BotoCoreError, ClientError

from arnav_core.aws_errors import to_arnav_error
from arnav_core.dao import OP_LIST, get_dao_for
from arnav_core.engine.identity_engine import new_session, requires_aws_identity
from arnav_core.errors import ArnavError, DaoNotFoundError
from arnav_core.tag_filter import matches_tag_filter

from .console import emit_structured, print_error
from .render import print_resource_table
from ..params import output_params


def parse_filters(raw: Optional[List[str]]) -> dict:
    """
    ["DatabaseName=vendas", "VpcId=vpc-1"] -> {"DatabaseName": "vendas", "VpcId": "vpc-1"}
    """
    filters = {}
    for item in raw or []:
        key, sep, value = item.partition("=")
        if not sep or not key or not value:
            raise typer.BadParameter(f"Filtro inválido {item!r}; use CHAVE=VALOR.")
        filters[key] = value
    return filters


@requires_aws_identity
def ls(
    service: str = typer.Argument(
        ...,
        help="Serviço canônico (ex.: ec2, vpc, cloudwatch, glue).",
    ),
    resource_type: str = typer.Argument(
        ...,
        help="Tipo de recurso (ex.: instances, subnets, log-groups, tables).",
    ),
    filter_opts: Optional[List[str]] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Filtro do pai, CHAVE=VALOR (ex.: DatabaseName=vendas). Pode repetir.",
    ),
    tag: Optional[str] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Filtro de tags: chave=valor, chave~parcial ou chave (case-insensitive). Vazio = qualquer tag.",
    ),
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
    Lista recursos de um tipo usando o DAO registrado.

    Ex:
    arnav ls ec2 instances
    arnav ls glue tables --filter DatabaseName=vendas
    arnav ls ec2 instances --tag env=prod
    """
    filters = parse_filters(filter_opts)

    try:
        dao_cls = get_dao_for(service, resource_type)
        if not dao_cls.supports(OP_LIST):
            raise DaoNotFoundError(f"O DAO de '{service}/{resource_type}' não suporta list.")

        dao = dao_cls(new_session(profile=profile, region=region))
        resources = list(dao.list_resources(filters))
        if tag is not None:
            resources = [r for r in resources if matches_tag_filter(r.tags, tag)]
    except ArnavError as e:
        print_error(e, output)
    except (ClientError, BotoCoreError) as e:
        print_error(to_arnav_error(e), output)

    if emit_structured([r.to_dict() for r in resources], output):
        return

    print_resource_table(resources, dao_cls.pretty_name or f"{service}/{resource_type}")

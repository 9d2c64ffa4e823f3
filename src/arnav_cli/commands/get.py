from typing import Optional

import typer
import typer_di
from botocore.exceptions import BotoCoreError, ClientError

from arnav_core.arn import parse_arn
from arnav_core.aws_errors import to_arnav_error
from arnav_core.engine.identity_engine import new_session, requires_aws_identity
from arnav_core.errors import ArnavError
from arnav_core.navigation import fetch

from .console import emit_structured, print_error
from .render import print_resource
from ..params import output_params


@requires_aws_identity
def get(
    arn: str = typer.Argument(
        ...,
        help="ARN do recurso a abrir.",
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
    Navega até o recurso do ARN: resolve o DAO, aplica o filtro do pai e faz o Get.
    """
    parsed = parse_arn(arn)
    try:
        session = new_session(profile=profile, region=region or (parsed.region if parsed else None))
        target, resource = fetch(arn, session)
    except ArnavError as e:
        print_error(e, output)
    except (ClientError, BotoCoreError) as e:
        print_error(to_arnav_error(e), output)

    if emit_structured({"target": target.to_dict(), "resource": resource.to_dict()}, output):
        return

    print_resource(resource, f"{target.service}/{target.resource_type}")

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import get_config
from ..models import AwsIdentity, AwsIdentityError


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def new_session(
    profile: Optional[str] = None,
    region: Optional[str] = None,
) -> boto3.session.Session:
    """
    Cria a session boto3; profile/region explícitos ganham do config.
    """
    cfg = get_config()
    return boto3.session.Session(
        profile_name=profile or cfg.profile,
        region_name=region or cfg.region,
    )


def get_current_aws_identity(
    profile: Optional[str] = None,
    region: Optional[str] = None,
) -> AwsIdentity:
    """
    Descobre a identidade AWS atual usando STS (Security Token Service),
    respeitando profile/region passados explicitamente (se houver).
    """
    session = new_session(profile=profile, region=region)
    sts = session.client("sts")

    try:
        resp = sts.get_caller_identity()
    except (BotoCoreError, ClientError) as e:
        raise AwsIdentityError(f"Não foi possível obter a identidade AWS atual: {e}") from e

    logger.debug("identidade AWS resolvida: %s", resp["Arn"])

    cfg = get_config()
    account = cfg.mask_account_id(resp["Account"])

    return AwsIdentity(
        account=account,
        arn=cfg.mask_text(resp["Arn"], resp["Account"]),
        user_id=resp["UserId"],
        region=session.region_name,
        profile=session.profile_name,
    )


def requires_aws_identity(func: T) -> T:
    @wraps(func)
    def wrapper(*args, **kwargs):
        # Typer injeta as opções como kwargs com o MESMO nome dos parâmetros
        profile = kwargs.get("profile")
        region = kwargs.get("region")

        get_current_aws_identity(profile=profile, region=region)

        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]

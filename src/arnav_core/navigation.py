import logging
from typing import Optional, Tuple

from boto3.session import Session

from .arn import parse_arn
from .dao import OP_GET, get_dao_for
from .errors import DaoNotFoundError, NotNavigableError
from .models import NavigationTarget, Resource


logger = logging.getLogger(__name__)


def resolve(value: str) -> Optional[NavigationTarget]:
    """
    Converte um ARN em destino de navegação: par canônico (service, resource_type),
    id do recurso e filtro do pai, se houver.

    Devolve None quando a string não é um ARN ou não é navegável;
    quem chama trata o valor como texto puro.
    """
    arn = parse_arn(value)
    if arn is None or not arn.can_navigate():
        logger.debug("valor não navegável: %r", value)
        return None

    service, resource_type = arn.service_resource_type()
    filter_key, filter_value = arn.extract_parent_filter()

    filters = {filter_key: filter_value} if filter_key and filter_value else {}

    return NavigationTarget(
        arn=arn.raw,
        service=service,
        resource_type=resource_type,
        resource_id=arn.resource_id,
        short_id=arn.short_id(),
        region=arn.region,
        filters=filters,
    )


def dao_for_target(target: NavigationTarget):
    dao_cls = get_dao_for(target.service, target.resource_type)
    if not dao_cls.supports(OP_GET):
        raise DaoNotFoundError(f"O DAO de '{target.key}' não suporta get.")
    return dao_cls


def fetch(value: str, session: Session) -> Tuple[NavigationTarget, Resource]:
    """
    Resolve o ARN e busca o recurso no DAO correspondente, passando o filtro do pai.
    """
    target = resolve(value)
    if target is None:
        raise NotNavigableError(f"'{value}' não é um ARN navegável.")

    dao_cls = dao_for_target(target)
    dao = dao_cls(session)

    identifier = dao_cls.identifier_for(target)
    logger.info("get %s %s filters=%s", target.key, identifier, target.filters)

    return target, dao.get(identifier, target.filters)

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Iterator, List, Optional, Type

from boto3.session import Session
from botocore.exceptions import BotoCoreError, ClientError

from ..aws_errors import to_arnav_error
from ..errors import MissingParentFilterError, ResourceNotFoundError
from ..models import NavigationTarget, Resource


logger = logging.getLogger(__name__)

OP_LIST = "list"
OP_GET = "get"

Filters = Optional[Dict[str, str]]


def paginate(client: Any, method: str, results_key: str, **kwargs: Any) -> Iterator[Any]:
    """
    Percorre todas as páginas de um paginator boto3 e devolve os itens de `results_key`.
    Erros do boto3 saem como AwsCallError (ver aws_errors.to_arnav_error).
    """
    paginator = client.get_paginator(method)
    try:
        for page in paginator.paginate(**kwargs):
            yield from page.get(results_key, []) or []
    except (ClientError, BotoCoreError) as e:
        raise to_arnav_error(e, method) from e


def _abstract_methods(cls: type) -> FrozenSet[str]:
    return frozenset(
        name for name in dir(cls) if getattr(getattr(cls, name, None), "__isabstractmethod__", False)
    )


class BaseDAO(ABC):
    """
    Classe base para todos os DAOs (data-access por tipo de recurso).

    Mantém um registry automático de subclasses concretas, indexado pelo
    par canônico (service, resource_type) que a navegação produz a partir do ARN.
    """

    registry: ClassVar[List[Type["BaseDAO"]]] = []

    # Par canônico do arnav (vpc/subnets, cloudwatch/log-groups...)
    service: str = ""
    resource_type: str = ""

    # Nome do client boto3, quando difere do serviço canônico (logs, stepfunctions...)
    client_name: str = ""

    pretty_name: str = ""

    # Chave de filtro do pai exigida por list/get (ex.: DatabaseName), ou None
    parent_filter: Optional[str] = None

    operations: ClassVar[FrozenSet[str]] = frozenset({OP_LIST, OP_GET})

    def __init_subclass__(cls, **kwargs):
        """
        Sempre que uma subclass é criada, se não for abstrata, entra no registry.
        """
        super().__init_subclass__(**kwargs)

        # __abstractmethods__ ainda não existe aqui: ABCMeta só o calcula depois do type.__new__
        if _abstract_methods(cls):
            return

        BaseDAO.registry.append(cls)

    def __init__(self, session: Session) -> None:
        self.session = session
        self.client = self.session.client(self.client_name or self.service)

    @classmethod
    def supports(cls, op: str) -> bool:
        return op in cls.operations

    @classmethod
    def identifier_for(cls, target: NavigationTarget) -> str:
        """
        Identificador que o `get` espera. A maioria das APIs usa o id;
        algumas (Step Functions, Secrets Manager) preferem o ARN inteiro.
        """
        return target.resource_id

    @abstractmethod
    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        ...

    @abstractmethod
    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        ...

    def require_filter(self, filters: Filters) -> str:
        """
        Devolve o valor do filtro do pai ou levanta MissingParentFilterError.
        """
        if self.parent_filter is None:
            return ""
        value = (filters or {}).get(self.parent_filter, "")
        if not value:
            raise MissingParentFilterError(self.service, self.resource_type, self.parent_filter)
        return value

    def _label(self, resource_id: str) -> str:
        label = self.pretty_name or f"{self.service}/{self.resource_type}"
        return f"{label} '{resource_id}'" if resource_id else label

    def _not_found(self, resource_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(f"{self._label(resource_id)} não encontrado")

    def _call(self, resource_id: str, method: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Chama a API; ClientError/BotoCoreError viram AwsCallError
        (not-found, acesso negado, throttling...) com o recurso no texto.
        """
        logger.debug("%s.%s %s", self.client_name or self.service, method, kwargs)
        try:
            return getattr(self.client, method)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.debug("%s.%s falhou: %s", self.client_name or self.service, method, e)
            raise to_arnav_error(e, self._label(resource_id)) from e

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from .normalize import normalize_resource_type, normalize_service
from .parent_filter import NO_FILTER, parent_filter_for


ARN_PREFIX = "arn:"
ARN_SECTIONS = 6

# Serviços cujo resource-part não carrega o tipo, ex.: arn:aws:s3:::meu-bucket
IMPLICIT_RESOURCE_TYPES = MappingProxyType(
    {
        "s3": "bucket",
        "sns": "topic",
        "sqs": "queue",
        "dynamodb": "table",
        "events": "event-bus",
    }
)


def is_arn(value: str) -> bool:
    """
    Checagem barata de formato: prefixo literal "arn:" e pelo menos 6 seções
    separadas por ':'. Não valida partition, região nem account.
    """
    if not isinstance(value, str):
        return False
    return value.startswith(ARN_PREFIX) and value.count(":") >= ARN_SECTIONS - 1


def split_resource(service: str, resource: str) -> Tuple[str, str]:
    """
    Separa o resource-part em (resource_type, resource_id).

    - "instance/i-123"                -> ("instance", "i-123")
    - "function:minha-func"           -> ("function", "minha-func")
    - "log-group:/aws/lambda/fn"      -> ("log-group", "/aws/lambda/fn")
    - "service/cluster/svc"           -> ("service", "cluster/svc")
    - "meu-bucket" (s3)               -> ("bucket", "meu-bucket")

    O separador que aparece primeiro ganha; em empate, ':' ganha.
    """
    if not resource:
        return "", ""

    slash_idx = resource.find("/")
    colon_idx = resource.find(":")

    if colon_idx != -1 and (slash_idx == -1 or colon_idx < slash_idx):
        return resource[:colon_idx], resource[colon_idx + 1:]

    if slash_idx != -1:
        return resource[:slash_idx], resource[slash_idx + 1:]

    return IMPLICIT_RESOURCE_TYPES.get(service, ""), resource


@dataclass(frozen=True)
class Arn:
    raw: str
    partition: str
    service: str
    region: str
    account_id: str
    resource_type: str
    resource_id: str

    @classmethod
    def parse(cls, arn: str) -> "Arn":
        """
        Versão estrita de `parse_arn`: levanta ValueError se a string não for um ARN.
        """
        parsed = parse_arn(arn)
        if parsed is None:
            raise ValueError(f"Invalid ARN: {arn}")
        return parsed

    @property
    def resource(self) -> str:
        # resource-part original, com todos os ':' e '/' internos
        return self.raw.split(":", ARN_SECTIONS - 1)[ARN_SECTIONS - 1]

    def __str__(self) -> str:
        return self.raw

    def short_id(self) -> str:
        """
        Último segmento do resource_id separado por '/', para exibição compacta.
        """
        if not self.resource_id:
            return ""
        return self.resource_id.rsplit("/", 1)[-1]

    def service_resource_type(self) -> Tuple[str, str]:
        """
        Par (service, resource_type) no vocabulário do arnav, ex.:
        ("logs", "log-group") -> ("cloudwatch", "log-groups").
        """
        return (
            normalize_service(self.service, self.resource_type),
            normalize_resource_type(self.service, self.resource_type),
        )

    def can_navigate(self) -> bool:
        service, resource_type = self.service_resource_type()
        if not service or not resource_type:
            return False
        # tipo explícito ou vindo da pluralização: ambos contam como navegáveis
        return True

    def extract_parent_filter(self) -> Tuple[str, str]:
        """
        Filtro do recurso pai exigido pelo Get de sub-recursos, ex.:
        arn:aws:guardduty:us-east-1:123:detector/abc/finding/xyz -> ("DetectorId", "abc").
        Devolve ("", "") quando não há relação de pai ou ela não está no ARN.
        """
        if not self.resource_id:
            return NO_FILTER
        rule = parent_filter_for(self.service, self.resource_type)
        if rule is None:
            return NO_FILTER
        return rule(self)


def parse_arn(value: str) -> Optional[Arn]:
    """
    Faz o parse de um ARN. Devolve None (nunca levanta) se a string não passar
    na checagem de formato.
    """
    if not is_arn(value):
        return None

    _, partition, service, region, account_id, resource = value.split(":", ARN_SECTIONS - 1)
    resource_type, resource_id = split_resource(service, resource)

    return Arn(
        raw=value,
        partition=partition,
        service=service,
        region=region,
        account_id=account_id,
        resource_type=resource_type,
        resource_id=resource_id,
    )


# Acessores seguros para resultado ausente: quem chama encadeia
# parse_arn(...) -> acessor sem checar None a cada passo.

def short_id(arn: Optional[Arn]) -> str:
    return arn.short_id() if arn is not None else ""


def arn_string(arn: Optional[Arn]) -> str:
    return arn.raw if arn is not None else ""


def service_resource_type(arn: Optional[Arn]) -> Tuple[str, str]:
    return arn.service_resource_type() if arn is not None else ("", "")


def can_navigate(arn: Optional[Arn]) -> bool:
    return arn.can_navigate() if arn is not None else False


def extract_parent_filter(arn: Optional[Arn]) -> Tuple[str, str]:
    return arn.extract_parent_filter() if arn is not None else NO_FILTER

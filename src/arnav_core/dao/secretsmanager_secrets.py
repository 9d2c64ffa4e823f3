from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import NavigationTarget, Resource


class SecretsManagerSecretDAO(BaseDAO):
    """
    Só metadados: o valor do segredo nunca é lido pelo arnav.
    """

    service = "secretsmanager"
    resource_type = "secrets"
    pretty_name = "Secrets Manager Secret"

    @classmethod
    def identifier_for(cls, target: NavigationTarget) -> str:
        # o id do ARN tem o sufixo aleatório (-AbCdEf); o ARN completo é inequívoco
        return target.arn

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for secret in paginate(self.client, "list_secrets", "SecretList"):
            yield Resource(
                id=secret["ARN"],
                name=secret.get("Name", ""),
                arn=secret["ARN"],
                tags=Resource.tags_from_list(secret.get("Tags")),
                data=secret,
            )

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        secret = self._call(resource_id, "describe_secret", SecretId=resource_id)
        secret.pop("ResponseMetadata", None)
        return Resource(
            id=resource_id,
            name=secret.get("Name", ""),
            arn=secret.get("ARN", resource_id),
            tags=Resource.tags_from_list(secret.get("Tags")),
            data=secret,
        )

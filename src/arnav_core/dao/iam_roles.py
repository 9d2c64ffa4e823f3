from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class IAMRoleDAO(BaseDAO):
    service = "iam"
    resource_type = "roles"
    pretty_name = "IAM Role"

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for role in paginate(self.client, "list_roles", "Roles"):
            yield Resource(
                id=role["RoleName"],
                name=role["RoleName"],
                arn=role.get("Arn", ""),
                tags=Resource.tags_from_list(role.get("Tags")),
                data=role,
            )

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # role/service-role/MinhaRole -> o nome é o último segmento do path
        role_name = resource_id.rsplit("/", 1)[-1]
        role = self._call(role_name, "get_role", RoleName=role_name).get("Role", {})
        return Resource(
            id=role_name,
            name=role.get("RoleName", role_name),
            arn=role.get("Arn", ""),
            tags=Resource.tags_from_list(role.get("Tags")),
            data=role,
        )

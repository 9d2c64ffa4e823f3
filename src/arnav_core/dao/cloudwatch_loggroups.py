from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


def log_group_name(resource_id: str) -> str:
    """
    resource_id => "/eks/cluster/app:*"
    Precisamos apenas do logGroupName (/eks/cluster/app), sem o ':*'.
    """
    return resource_id.split(":", 1)[0]


class CloudWatchLogGroupDAO(BaseDAO):
    service = "cloudwatch"
    resource_type = "log-groups"
    client_name = "logs"
    pretty_name = "CloudWatch Log Group"

    def _to_resource(self, lg: dict) -> Resource:
        name = lg["logGroupName"]
        return Resource(id=name, name=name, arn=lg.get("arn", ""), data=lg)

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for lg in paginate(self.client, "describe_log_groups", "logGroups"):
            yield self._to_resource(lg)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        name = log_group_name(resource_id)

        # não existe "describe_log_group"; busca por prefixo e confere o nome exato
        resp = self._call(name, "describe_log_groups", logGroupNamePrefix=name)
        for lg in resp.get("logGroups", []):
            if lg.get("logGroupName") == name:
                return self._to_resource(lg)

        raise self._not_found(name)

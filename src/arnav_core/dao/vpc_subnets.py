from typing import Dict, Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class SubnetDAO(BaseDAO):
    service = "vpc"
    resource_type = "subnets"
    client_name = "ec2"
    pretty_name = "Subnet"

    def _to_resource(self, subnet: Dict) -> Resource:
        subnet_id = subnet["SubnetId"]
        tags = Resource.tags_from_list(subnet.get("Tags"))
        return Resource(
            id=subnet_id,
            name=tags.get("Name") or subnet_id,
            arn=subnet.get("SubnetArn", ""),
            tags=tags,
            data=subnet,
        )

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        kwargs = {}
        # filtro opcional para navegar de uma VPC para as subnets dela
        vpc_id = (filters or {}).get("VpcId")
        if vpc_id:
            kwargs["Filters"] = [{"Name": "vpc-id", "Values": [vpc_id]}]

        for subnet in paginate(self.client, "describe_subnets", "Subnets", **kwargs):
            yield self._to_resource(subnet)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        resp = self._call(resource_id, "describe_subnets", SubnetIds=[resource_id])
        subnets = resp.get("Subnets", [])
        if not subnets:
            raise self._not_found(resource_id)
        return self._to_resource(subnets[0])

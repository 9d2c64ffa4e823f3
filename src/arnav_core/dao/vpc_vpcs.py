from typing import Dict, Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class VpcDAO(BaseDAO):
    service = "vpc"
    resource_type = "vpcs"
    client_name = "ec2"
    pretty_name = "VPC"

    def _to_resource(self, vpc: Dict) -> Resource:
        vpc_id = vpc["VpcId"]
        tags = Resource.tags_from_list(vpc.get("Tags"))
        region = self.session.region_name or ""
        return Resource(
            id=vpc_id,
            name=tags.get("Name") or vpc_id,
            arn=f"arn:aws:ec2:{region}:{vpc.get('OwnerId', '')}:vpc/{vpc_id}",
            tags=tags,
            data=vpc,
        )

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for vpc in paginate(self.client, "describe_vpcs", "Vpcs"):
            yield self._to_resource(vpc)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        resp = self._call(resource_id, "describe_vpcs", VpcIds=[resource_id])
        vpcs = resp.get("Vpcs", [])
        if not vpcs:
            raise self._not_found(resource_id)
        return self._to_resource(vpcs[0])

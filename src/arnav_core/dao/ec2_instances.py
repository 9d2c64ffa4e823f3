from typing import Dict, Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


def _name_tag(tags: Dict[str, str], default: str) -> str:
    return tags.get("Name") or default


class EC2InstanceDAO(BaseDAO):
    service = "ec2"
    resource_type = "instances"
    pretty_name = "EC2 Instance"

    def _to_resource(self, instance: Dict, owner_id: str) -> Resource:
        instance_id = instance["InstanceId"]
        tags = Resource.tags_from_list(instance.get("Tags"))
        region = self.session.region_name or ""
        return Resource(
            id=instance_id,
            name=_name_tag(tags, instance_id),
            arn=f"arn:aws:ec2:{region}:{owner_id}:instance/{instance_id}",
            tags=tags,
            data=instance,
        )

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for reservation in paginate(self.client, "describe_instances", "Reservations"):
            owner_id = reservation.get("OwnerId", "")
            for instance in reservation.get("Instances", []):
                yield self._to_resource(instance, owner_id)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # arn:aws:ec2:region:account:instance/i-abc123 -> resource_id = "i-abc123"
        resp = self._call(resource_id, "describe_instances", InstanceIds=[resource_id])
        for reservation in resp.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                return self._to_resource(instance, reservation.get("OwnerId", ""))
        raise self._not_found(resource_id)

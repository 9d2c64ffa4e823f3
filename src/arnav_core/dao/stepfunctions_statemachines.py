from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import NavigationTarget, Resource


class StepFunctionsStateMachineDAO(BaseDAO):
    service = "stepfunctions"
    resource_type = "state-machines"
    pretty_name = "Step Functions State Machine"

    @classmethod
    def identifier_for(cls, target: NavigationTarget) -> str:
        # describe_state_machine só aceita o ARN
        return target.arn

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for sm in paginate(self.client, "list_state_machines", "stateMachines"):
            yield Resource(
                id=sm["stateMachineArn"],
                name=sm.get("name", ""),
                arn=sm["stateMachineArn"],
                data=sm,
            )

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        sm = self._call(resource_id, "describe_state_machine", stateMachineArn=resource_id)
        sm.pop("ResponseMetadata", None)
        return Resource(
            id=resource_id,
            name=sm.get("name", ""),
            arn=sm.get("stateMachineArn", resource_id),
            data=sm,
        )

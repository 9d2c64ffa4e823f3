from typing import Iterable, List

from .base import BaseDAO, Filters, paginate
from ..models import Resource


# get_findings aceita no máximo 50 ids por chamada
FINDINGS_BATCH_SIZE = 50


class GuardDutyFindingDAO(BaseDAO):
    service = "guardduty"
    resource_type = "findings"
    pretty_name = "GuardDuty Finding"
    parent_filter = "DetectorId"

    def _to_resource(self, finding: dict) -> Resource:
        return Resource(
            id=finding["Id"],
            name=finding.get("Title", finding["Id"]),
            arn=finding.get("Arn", ""),
            data=finding,
        )

    def _get_findings(self, detector_id: str, finding_ids: List[str]) -> List[dict]:
        resp = self._call(detector_id, "get_findings", DetectorId=detector_id, FindingIds=finding_ids)
        return resp.get("Findings", [])

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        detector_id = self.require_filter(filters)

        batch: List[str] = []
        for finding_id in paginate(self.client, "list_findings", "FindingIds", DetectorId=detector_id):
            batch.append(finding_id)
            if len(batch) == FINDINGS_BATCH_SIZE:
                yield from (self._to_resource(f) for f in self._get_findings(detector_id, batch))
                batch = []

        if batch:
            yield from (self._to_resource(f) for f in self._get_findings(detector_id, batch))

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        detector_id = self.require_filter(filters)

        # aceita o id puro ou "<detector>/finding/<finding>"
        finding_id = resource_id.rsplit("/", 1)[-1]

        findings = self._get_findings(detector_id, [finding_id])
        if not findings:
            raise self._not_found(finding_id)
        return self._to_resource(findings[0])

from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class GuardDutyDetectorDAO(BaseDAO):
    service = "guardduty"
    resource_type = "detectors"
    pretty_name = "GuardDuty Detector"

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for detector_id in paginate(self.client, "list_detectors", "DetectorIds"):
            yield Resource(id=detector_id, name=detector_id)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # ARN de finding (detector/<id>/finding/<id>) navega para o detector dono
        detector_id = (filters or {}).get("DetectorId") or resource_id
        detector = self._call(detector_id, "get_detector", DetectorId=detector_id)
        detector.pop("ResponseMetadata", None)
        return Resource(
            id=detector_id,
            name=detector_id,
            tags=Resource.tags_from_list(detector.get("Tags")),
            data=detector,
        )

from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class GlueJobDAO(BaseDAO):
    service = "glue"
    resource_type = "jobs"
    pretty_name = "Glue Job"

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for job in paginate(self.client, "get_jobs", "Jobs"):
            yield Resource(id=job["Name"], name=job["Name"], data=job)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # job/<job> ou job/<job>/run/<run-id>: o filtro JobName já vem sem o run
        name = (filters or {}).get("JobName") or resource_id
        job = self._call(name, "get_job", JobName=name).get("Job", {})
        return Resource(id=name, name=job.get("Name", name), data=job)

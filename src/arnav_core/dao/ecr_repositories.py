from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class ECRRepositoryDAO(BaseDAO):
    service = "ecr"
    resource_type = "repositories"
    pretty_name = "ECR Repository"

    def _to_resource(self, repo: dict) -> Resource:
        return Resource(
            id=repo["repositoryName"],
            name=repo["repositoryName"],
            arn=repo.get("repositoryArn", ""),
            data=repo,
        )

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for repo in paginate(self.client, "describe_repositories", "repositories"):
            yield self._to_resource(repo)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # arn:aws:ecr:region:account:repository/time/app -> nome "time/app" (namespaces usam '/')
        resp = self._call(
            resource_id,
            "describe_repositories",
            repositoryNames=[resource_id],
        )
        repos = resp.get("repositories", [])
        if not repos:
            raise self._not_found(resource_id)
        return self._to_resource(repos[0])

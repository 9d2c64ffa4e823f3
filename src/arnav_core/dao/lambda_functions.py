from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class LambdaFunctionDAO(BaseDAO):
    service = "lambda"
    resource_type = "functions"
    pretty_name = "Lambda Function"

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        for fn in paginate(self.client, "list_functions", "Functions"):
            yield Resource(
                id=fn["FunctionName"],
                name=fn["FunctionName"],
                arn=fn.get("FunctionArn", ""),
                data=fn,
            )

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # arn:aws:lambda:region:account:function:nome[:alias] -> resource_id = "nome[:alias]"
        name = resource_id.split(":", 1)[0]
        resp = self._call(name, "get_function", FunctionName=name)
        config = resp.get("Configuration", {})
        return Resource(
            id=name,
            name=config.get("FunctionName", name),
            arn=config.get("FunctionArn", ""),
            tags=Resource.tags_from_list(resp.get("Tags")),
            data=config,
        )

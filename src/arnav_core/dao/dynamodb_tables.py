from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class DynamoDBTableDAO(BaseDAO):
    service = "dynamodb"
    resource_type = "tables"
    pretty_name = "DynamoDB Table"

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        # list_tables só devolve nomes; detalhes ficam para o get
        for name in paginate(self.client, "list_tables", "TableNames"):
            yield Resource(id=name, name=name)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # table/minha-tabela/stream/... -> só o nome da tabela interessa
        name = resource_id.split("/", 1)[0]
        table = self._call(name, "describe_table", TableName=name).get("Table", {})
        return Resource(
            id=name,
            name=table.get("TableName", name),
            arn=table.get("TableArn", ""),
            data=table,
        )

from typing import Iterable

from .base import BaseDAO, Filters, paginate
from ..models import Resource


class GlueTableDAO(BaseDAO):
    """
    Tabelas do Glue Data Catalog. Só existem dentro de um database,
    por isso list/get exigem o filtro DatabaseName.
    """

    service = "glue"
    resource_type = "tables"
    pretty_name = "Glue Table"
    parent_filter = "DatabaseName"

    def _to_resource(self, database: str, table: dict) -> Resource:
        name = table["Name"]
        return Resource(id=f"{database}/{name}", name=name, data=table)

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        database = self.require_filter(filters)
        for table in paginate(self.client, "get_tables", "TableList", DatabaseName=database):
            yield self._to_resource(database, table)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        database = self.require_filter(filters)

        # table/<database>/<table> -> resource_id = "<database>/<table>"
        name = resource_id.split("/", 1)[1] if "/" in resource_id else resource_id

        table = self._call(resource_id, "get_table", DatabaseName=database, Name=name).get("Table", {})
        return self._to_resource(database, table)

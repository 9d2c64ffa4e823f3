from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class NavigationTarget:
    """
    Destino de navegação derivado de um ARN: qual DAO chamar e com qual filtro.
    """

    arn: str
    service: str
    resource_type: str
    resource_id: str
    short_id: str
    region: str = ""
    filters: Dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return f"{self.service}/{self.resource_type}"

    def to_dict(self) -> dict:
        return {
            "arn": self.arn,
            "service": self.service,
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
            "short_id": self.short_id,
            "region": self.region,
            "filters": dict(self.filters),
        }

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class Resource:
    """
    Registro de exibição devolvido pelos DAOs.
    `data` guarda a resposta crua da API para a visão de detalhe.
    """

    id: str
    name: str = ""
    arn: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def tags_from_list(cls, raw_tags: Any) -> Dict[str, str]:
        """
        Aceita [{"Key": ..., "Value": ...}] ou dict[str, str].
        """
        if not raw_tags:
            return {}
        if isinstance(raw_tags, dict):
            return {str(k): str(v) for k, v in raw_tags.items()}
        return {t["Key"]: t.get("Value", "") for t in raw_tags}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "arn": self.arn,
            "tags": dict(self.tags),
            "data": self.data,
        }

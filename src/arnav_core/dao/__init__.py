# src/arnav_core/dao/__init__.py
from .base import BaseDAO, OP_GET, OP_LIST, paginate

import importlib
import pkgutil

from ..errors import DaoNotFoundError


_loaded = False


def load_daos() -> None:
    """
    Garante que todos os módulos em arnav_core.dao.* foram importados,
    para que o __init_subclass__ do BaseDAO tenha rodado e populado o registry.
    """
    global _loaded
    if _loaded:
        return

    package_name = __name__  # "arnav_core.dao"

    for _, name, _ in pkgutil.iter_modules(__path__, package_name + "."):
        if name.endswith(".base"):
            continue
        importlib.import_module(name)

    _loaded = True


def get_dao_for(service: str, resource_type: str) -> type[BaseDAO]:
    """
    Resolve o DAO registrado para o par canônico (service, resource_type).
    """
    load_daos()

    service = service.lower()
    resource_type = resource_type.lower()

    for dao_cls in BaseDAO.registry:
        if dao_cls.service == service and dao_cls.resource_type == resource_type:
            return dao_cls

    raise DaoNotFoundError(f"Nenhum DAO registrado para '{service}/{resource_type}'.")


def registered_daos() -> list[type[BaseDAO]]:
    load_daos()
    return sorted(BaseDAO.registry, key=lambda c: (c.service, c.resource_type))


__all__ = [
    "BaseDAO",
    "OP_GET",
    "OP_LIST",
    "get_dao_for",
    "load_daos",
    "paginate",
    "registered_daos",
]

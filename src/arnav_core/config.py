import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import boto3
import yaml

from .errors import ConfigError
from .models import ActionSpec


logger = logging.getLogger(__name__)

DEMO_ACCOUNT_ID = "123456789012"
CONFIG_ENV_VAR = "ARNAV_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/arnav/config.yaml")


@dataclass
class AppConfig:
    profile: Optional[str] = None
    region: Optional[str] = None
    read_only: bool = False
    demo_mode: bool = False
    log_file: Optional[str] = None
    # chave "service/resource_type" canônica -> ações disponíveis
    actions: Dict[str, List[ActionSpec]] = field(default_factory=dict)

    def mask_account_id(self, account_id: str) -> str:
        """
        Em demo mode o account ID real nunca aparece na tela.
        """
        if self.demo_mode and account_id:
            return DEMO_ACCOUNT_ID
        return account_id

    def mask_text(self, text: str, account_id: str) -> str:
        """
        Troca o account ID real dentro de um valor derivado (ARN do pai, ARN do STS).
        """
        if not self.demo_mode or not account_id or not text:
            return text
        return text.replace(account_id, DEMO_ACCOUNT_ID)

    def actions_for(self, service: str, resource_type: str) -> List[ActionSpec]:
        return list(self.actions.get(f"{service}/{resource_type}", []))


def _parse_actions(raw: Any) -> Dict[str, List[ActionSpec]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("'actions' deve ser um mapa de 'service/type' para lista de ações.")

    actions: Dict[str, List[ActionSpec]] = {}
    for key, items in raw.items():
        if "/" not in str(key):
            raise ConfigError(f"Chave de ação inválida: {key!r} (esperado 'service/type').")
        if not isinstance(items, list):
            raise ConfigError(f"Ações de {key!r} devem ser uma lista.")

        specs = []
        for item in items:
            if not isinstance(item, dict) or not item.get("name") or not item.get("command"):
                raise ConfigError(f"Ação inválida em {key!r}: 'name' e 'command' são obrigatórios.")
            specs.append(
                ActionSpec(
                    name=str(item["name"]),
                    command=str(item["command"]),
                    confirm=bool(item.get("confirm", False)),
                    dangerous=bool(item.get("dangerous", False)),
                )
            )
        actions[str(key)] = specs

    return actions


def config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def load_config(path: str | Path | None = None) -> AppConfig:
    """
    Carrega o config YAML. Arquivo inexistente -> defaults;
    YAML inválido ou com tipos errados -> ConfigError.
    """
    cfg_path = config_path(path)

    if not cfg_path.exists():
        logger.debug("config %s não encontrado, usando defaults", cfg_path)
        return AppConfig()

    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config inválido em {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config inválido em {cfg_path}: esperado um mapa no topo.")

    logger.debug("config carregado de %s", cfg_path)

    return AppConfig(
        profile=data.get("profile"),
        region=data.get("region"),
        read_only=bool(data.get("read_only", False)),
        demo_mode=bool(data.get("demo_mode", False)),
        log_file=data.get("log_file"),
        actions=_parse_actions(data.get("actions")),
    )


_current: Optional[AppConfig] = None


def get_config() -> AppConfig:
    global _current
    if _current is None:
        _current = load_config()
    return _current


def set_config(cfg: Optional[AppConfig]) -> None:
    global _current
    _current = cfg


def list_profiles() -> List[str]:
    """
    Profiles conhecidos pelo botocore (~/.aws/credentials e ~/.aws/config, ou os
    caminhos de AWS_SHARED_CREDENTIALS_FILE / AWS_CONFIG_FILE), com "default" primeiro.
    """
    names = set(boto3.session.Session().available_profiles)
    names.discard("default")
    return ["default"] + sorted(names)

from .action import action
from .daos import daos
from .get import get
from .ls import ls
from .parse import parse
from .profiles import profiles
from .resolve import resolve
from .whoami import whoami

__all__ = ["action", "daos", "get", "ls", "parse", "profiles", "resolve", "whoami"]

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionSpec:
    name: str
    command: str
    confirm: bool = False
    dangerous: bool = False


@dataclass
class ActionResult:
    success: bool
    message: str = ""
    command: str = ""

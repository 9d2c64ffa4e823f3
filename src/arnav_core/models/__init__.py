from .Action import ActionResult, ActionSpec
from .AwsIdentity import AwsIdentity, AwsIdentityError
from .NavigationTarget import NavigationTarget
from .Resource import Resource

__all__ = [
    "ActionResult",
    "ActionSpec",
    "AwsIdentity",
    "AwsIdentityError",
    "NavigationTarget",
    "Resource",
]

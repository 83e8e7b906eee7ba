"""Action services: package manager detection, planning, execution."""

from .errors import ActionError
from .package_manager import PackageManager, detect_package_manager
from .runner import ActionPlan, ActionRunner, Step

__all__ = [
    "ActionError",
    "ActionPlan",
    "ActionRunner",
    "PackageManager",
    "Step",
    "detect_package_manager",
]

from hyprdots.core.package_manager.abc import InstallResult, PackageManager
from hyprdots.core.package_manager.dry_run import DryRunPackageManager
from hyprdots.core.package_manager.real import RealPackageManager

__all__ = [
    "DryRunPackageManager",
    "InstallResult",
    "PackageManager",
    "RealPackageManager",
]

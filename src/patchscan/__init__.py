"""patchscan - method patch inventory and conflict reporting."""

__version__ = "0.1.0"

from patchscan.application.services.scanner import PatchScanner
from patchscan.domain.model.settings import ScannerSettings

__all__ = ["PatchScanner", "ScannerSettings", "__version__"]

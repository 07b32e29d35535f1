"""Domain ports (interfaces/protocols)."""

from patchscan.domain.ports.notifier import NoticeLevel, NotifierProtocol
from patchscan.domain.ports.patch_source import PatchSourceProtocol
from patchscan.domain.ports.report_sink import ReportSinkProtocol

__all__ = [
    "NoticeLevel",
    "NotifierProtocol",
    "PatchSourceProtocol",
    "ReportSinkProtocol",
]

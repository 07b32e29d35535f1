"""Adapters: patch sources, report sink, notifier, settings file."""

from patchscan.infrastructure.adapters.file_sink import FileReportSink
from patchscan.infrastructure.adapters.json_source import JsonSnapshotSource
from patchscan.infrastructure.adapters.memory_source import InMemoryPatchSource
from patchscan.infrastructure.adapters.rich_notifier import RichNotifier
from patchscan.infrastructure.adapters.settings_file import load_settings

__all__ = [
    "FileReportSink",
    "InMemoryPatchSource",
    "JsonSnapshotSource",
    "RichNotifier",
    "load_settings",
]

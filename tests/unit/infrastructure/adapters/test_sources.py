"""Tests for patch source adapters.

Tests:
- InMemoryPatchSource: install indices per target and stage
- JsonSnapshotSource: parsing, lazy per-method validation, file errors
"""

import json
from pathlib import Path

import pytest

from patchscan.application.services.aggregator import collect_patches
from patchscan.domain.exceptions import MalformedRecordError, SourceUnavailableError
from patchscan.domain.model.raw_patch import HandlerRef, PatchedMethod
from patchscan.domain.model.settings import ScannerSettings
from patchscan.domain.model.stage import PatchStage
from patchscan.domain.ports.patch_source import PatchSourceProtocol
from patchscan.infrastructure.adapters.json_source import JsonSnapshotSource
from patchscan.infrastructure.adapters.memory_source import InMemoryPatchSource
from tests.factories import make_method

FOO_BAR = PatchedMethod(declaring_type="Foo", name="Bar")

HANDLER = {
    "declaring_type": "ModA.Patches",
    "name": "Prefix",
    "module": "ModA",
    "module_location": "/mods/ModA/bin/Win64/ModA.dll",
}


def _write_snapshot(tmp_path: Path, methods: object) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"methods": methods}), encoding="utf-8")
    return path


class TestInMemoryPatchSource:
    """Tests for InMemoryPatchSource."""

    def test_satisfies_protocol(self) -> None:
        source: PatchSourceProtocol = InMemoryPatchSource()
        assert list(source.get_all_patched_methods()) == []

    def test_indices_per_stage(self) -> None:
        source = InMemoryPatchSource()

        a = source.register(FOO_BAR, PatchStage.PREFIX, owner="a")
        b = source.register(FOO_BAR, PatchStage.PREFIX, owner="b", priority=400)
        c = source.register(FOO_BAR, PatchStage.POSTFIX, owner="c")

        assert (a.index, b.index, c.index) == (0, 1, 0)
        assert b.priority == 400

    def test_patch_info(self) -> None:
        source = InMemoryPatchSource()
        handler = HandlerRef(name="Prefix")
        patch = source.register(FOO_BAR, PatchStage.PREFIX, owner="a", handler=handler)

        info = source.get_patch_info(FOO_BAR)

        assert info is not None
        assert info.prefixes == (patch,)
        assert info.postfixes == ()

    def test_unknown_method(self) -> None:
        assert InMemoryPatchSource().get_patch_info(FOO_BAR) is None

    def test_method_order(self) -> None:
        source = InMemoryPatchSource()
        for key in ("B.Two", "A.One", "B.Two"):
            source.register(make_method(key), PatchStage.PREFIX, owner="x")

        assert [m.key for m in source.get_all_patched_methods()] == ["B.Two", "A.One"]


class TestJsonSnapshotSource:
    """Tests for JsonSnapshotSource."""

    def test_parses_methods_and_patches(self, tmp_path: Path) -> None:
        path = _write_snapshot(
            tmp_path,
            [
                {
                    "declaring_type": "Foo",
                    "name": "Bar",
                    "patches": {
                        "Prefix": [
                            {"owner": "com.moda", "priority": 400, "index": 0, "handler": HANDLER}
                        ],
                        "Postfix": [{"owner": "com.modb", "index": 0}],
                    },
                }
            ],
        )
        source = JsonSnapshotSource(path)

        methods = list(source.get_all_patched_methods())
        info = source.get_patch_info(methods[0])

        assert methods == [FOO_BAR]
        assert info is not None
        assert info.prefixes[0].priority == 400
        assert info.prefixes[0].handler == HandlerRef(**HANDLER)
        assert info.postfixes[0].priority == 0
        assert info.postfixes[0].handler is None
        assert info.transpilers == ()

    def test_end_to_end_collect(self, tmp_path: Path) -> None:
        path = _write_snapshot(
            tmp_path,
            [
                {
                    "declaring_type": "Foo",
                    "name": "Bar",
                    "patches": {
                        "Prefix": [
                            {"owner": "com.moda", "priority": 400, "index": 0, "handler": HANDLER}
                        ]
                    },
                }
            ],
        )

        result = collect_patches(JsonSnapshotSource(path), ScannerSettings())

        record = result.patches_by_target["Foo.Bar"][0]
        assert record.owner == "ModA (ModA)"
        assert record.handler == "ModA.Patches.Prefix"

    def test_signature_distinguishes_overloads(self, tmp_path: Path) -> None:
        path = _write_snapshot(
            tmp_path,
            [
                {"declaring_type": "Foo", "name": "Bar", "signature": "(int)"},
                {"declaring_type": "Foo", "name": "Bar", "signature": "(string)"},
            ],
        )

        methods = list(JsonSnapshotSource(path).get_all_patched_methods())

        assert len(methods) == 2
        assert {m.key for m in methods} == {"Foo.Bar"}

    def test_nameless_entry_skipped(self, tmp_path: Path) -> None:
        path = _write_snapshot(tmp_path, [{"declaring_type": "Foo"}, {"name": "Bar"}, "junk"])

        methods = list(JsonSnapshotSource(path).get_all_patched_methods())

        assert methods == [PatchedMethod(declaring_type=None, name="Bar")]

    def test_missing_file(self, tmp_path: Path) -> None:
        source = JsonSnapshotSource(tmp_path / "missing.json")

        with pytest.raises(SourceUnavailableError):
            list(source.get_all_patched_methods())

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SourceUnavailableError):
            list(JsonSnapshotSource(path).get_all_patched_methods())

    def test_missing_methods_list(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        path.write_text('{"patches": []}', encoding="utf-8")

        with pytest.raises(SourceUnavailableError, match="'methods' list"):
            list(JsonSnapshotSource(path).get_all_patched_methods())

    @pytest.mark.parametrize(
        ("patches", "reason"),
        [
            ({"Reverse": []}, "unknown stage"),
            ({"Prefix": {}}, "must be a list"),
            ({"Prefix": ["x"]}, "entry must be an object"),
            ({"Prefix": [{"index": 0, "priority": "high"}]}, "priority must be an integer"),
            ({"Prefix": [{"index": 0, "priority": True}]}, "priority must be an integer"),
            ({"Prefix": [{"priority": 0}]}, "index must be a non-negative integer"),
            ({"Prefix": [{"index": -1}]}, "index must be a non-negative integer"),
            ({"Prefix": [{"index": 0, "owner": 5}]}, "owner must be a string"),
            ({"Prefix": [{"index": 0, "handler": "x"}]}, "handler must be an object"),
            ({"Prefix": [{"index": 0, "handler": {"name": 1}}]}, "handler name must be a string"),
        ],
    )
    def test_malformed_method(self, tmp_path: Path, patches: object, reason: str) -> None:
        entry = {"declaring_type": "Foo", "name": "Bar", "patches": patches}
        path = _write_snapshot(tmp_path, [entry])
        source = JsonSnapshotSource(path)

        with pytest.raises(MalformedRecordError, match=reason):
            source.get_patch_info(FOO_BAR)

    def test_malformed_method_fails_alone(self, tmp_path: Path) -> None:
        path = _write_snapshot(
            tmp_path,
            [
                {"declaring_type": "Foo", "name": "Bad", "patches": {"Prefix": [{"priority": 0}]}},
                {"declaring_type": "Foo", "name": "Good", "patches": {"Prefix": [{"index": 0}]}},
            ],
        )
        settings = ScannerSettings(exclude_common_lifecycle_methods=False)

        result = collect_patches(JsonSnapshotSource(path), settings)

        assert list(result.patches_by_target) == ["Foo.Good"]
        assert [e.target for e in result.errors] == ["Foo.Bad"]

    def test_unknown_method_none(self, tmp_path: Path) -> None:
        path = _write_snapshot(tmp_path, [])
        assert JsonSnapshotSource(path).get_patch_info(FOO_BAR) is None

    def test_file_read_once(self, tmp_path: Path) -> None:
        path = _write_snapshot(tmp_path, [{"declaring_type": "Foo", "name": "Bar"}])
        source = JsonSnapshotSource(path)
        list(source.get_all_patched_methods())

        path.unlink()

        assert list(source.get_all_patched_methods()) == [FOO_BAR]

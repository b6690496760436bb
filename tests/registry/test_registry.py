# mimetable:header:start
#
#   project      : MimeTable
#   file         : test_registry.py
#   file_relpath : tests/registry/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Tests for `MimeTypeRegistry` construction and the process-wide registry."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest

from mimetable.model.errors import RegistryInitializationError
from mimetable.registry import registry as registry_module
from mimetable.registry.overrides import ExtensionOverride
from mimetable.registry.registry import (
    MimeTypeRegistry,
    get_registry,
    normalize_extension,
    reset_registry,
    set_registry,
)
from tests.conftest import make_registry

if TYPE_CHECKING:
    from pathlib import Path

SMALL = """\
image/png\t\tpng
image/gif\t\tgif
"""


def test_bundled_registry_has_overridden_jpeg(registry: MimeTypeRegistry) -> None:
    jpeg = registry.get("image/jpeg")
    assert jpeg is not None
    assert jpeg.extensions == ("jpg", "jpeg", "jpe")
    assert registry.lookup_extension("jfif") is None
    for ext in ("jpg", "jpeg", "jpe", ".JPG"):
        assert registry.lookup_extension(ext) is jpeg


def test_bundled_registry_has_overridden_tiff(registry: MimeTypeRegistry) -> None:
    tiff = registry.get("image/tiff")
    assert tiff is not None
    assert tiff.extensions == ("tif", "tiff")
    assert tiff.preferred_extension == "tif"


def test_ent_resolves_to_application_xml(registry: MimeTypeRegistry) -> None:
    xml = registry.get("application/xml")
    assert xml is not None
    assert xml.extensions[-1] == "ent"
    assert registry.lookup_extension("ent") is xml
    assert registry.extension_to_type["ent"] == "application/xml"


def test_overridden_types_move_to_the_end(registry: MimeTypeRegistry) -> None:
    assert list(registry.types_by_name)[-3:] == ["image/jpeg", "image/tiff", "application/xml"]


def test_registered_instances_are_canonical(registry: MimeTypeRegistry) -> None:
    for name, mime in registry.types_by_name.items():
        assert mime.registered
        assert mime.type_name == name


def test_extension_index_is_consistent(registry: MimeTypeRegistry) -> None:
    for ext, name in registry.extension_to_type.items():
        assert ext == ext.lower()
        assert not ext.startswith(".")
        assert ext in registry.types_by_name[name].extensions


def test_recovered_comment_types_are_present(registry: MimeTypeRegistry) -> None:
    gmx = registry.get("application/vnd.gmx")
    assert gmx is not None
    assert gmx.extensions == ()


def test_construction_is_repeatable(registry: MimeTypeRegistry) -> None:
    again = MimeTypeRegistry.bundled()
    assert list(again.types_by_name) == list(registry.types_by_name)
    assert dict(again.extension_to_type) == dict(registry.extension_to_type)
    assert [m.extensions for m in again] == [m.extensions for m in registry]


def test_views_are_read_only(registry: MimeTypeRegistry) -> None:
    with pytest.raises(TypeError):
        registry.types_by_name["x/y"] = registry.types_by_name["image/png"]  # type: ignore[index]
    with pytest.raises(TypeError):
        registry.extension_to_type["zzz"] = "image/png"  # type: ignore[index]


def test_container_protocol(registry: MimeTypeRegistry) -> None:
    assert "image/png" in registry
    assert "image/nope" not in registry
    assert len(registry) == len(registry.names())
    assert list(registry.names()) == sorted(registry.names())
    assert "image" in registry.primary_types()


def test_normalize_extension() -> None:
    assert normalize_extension(".JPG") == "jpg"
    assert normalize_extension("..gz") == ".gz"
    assert normalize_extension("Png") == "png"


def test_later_lines_win_for_shared_extensions() -> None:
    reg = make_registry("a/one\t\tdup\nb/two\t\tdup\n", overrides=())
    assert reg.extension_to_type["dup"] == "b/two"


def test_custom_overrides_apply_in_order() -> None:
    reg = make_registry(
        SMALL,
        overrides=(
            ExtensionOverride("image/png", ("png", "apng")),
            ExtensionOverride("image/png", ("pngx",), append=True),
        ),
    )
    png = reg.get("image/png")
    assert png is not None
    assert png.extensions == ("png", "apng", "pngx")
    assert reg.lookup_extension("apng") is png


def test_override_of_unknown_type_raises() -> None:
    with pytest.raises(RegistryInitializationError, match="unknown type"):
        make_registry(SMALL, overrides=(ExtensionOverride("image/jpeg", ("jpg",)),))


def test_empty_dataset_raises() -> None:
    with pytest.raises(RegistryInitializationError, match="no valid types"):
        make_registry("# only comments\n\n", overrides=())


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "custom.types"
    path.write_text(SMALL, encoding="utf-8")
    reg = MimeTypeRegistry.from_file(path, overrides=())
    assert reg.names() == ("image/gif", "image/png")


def test_from_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(RegistryInitializationError):
        MimeTypeRegistry.from_file(tmp_path / "missing.types")


@pytest.mark.usefixtures("restore_default_registry")
def test_get_registry_is_cached() -> None:
    reset_registry()
    assert get_registry() is get_registry()


@pytest.mark.usefixtures("restore_default_registry")
def test_set_registry_replaces_default() -> None:
    custom = make_registry(SMALL, overrides=())
    set_registry(custom)
    assert get_registry() is custom
    reset_registry()
    assert get_registry() is not custom


@pytest.mark.usefixtures("restore_default_registry")
def test_concurrent_first_access_builds_once(monkeypatch: pytest.MonkeyPatch) -> None:
    reset_registry()
    calls: list[int] = []
    barrier = threading.Barrier(8)
    built = make_registry(SMALL, overrides=())

    def _bundled(*_args: object) -> MimeTypeRegistry:
        calls.append(1)
        return built

    monkeypatch.setattr(registry_module.MimeTypeRegistry, "bundled", _bundled)

    seen: list[MimeTypeRegistry] = []

    def _worker() -> None:
        barrier.wait()
        seen.append(get_registry())

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(seen) == 8
    assert all(r is built for r in seen)

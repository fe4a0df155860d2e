"""
Summary: Validate that path queries flow through injected ports.
Why: Path values must only forward normalized text and interpret result codes.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from pytest_mock import MockerFixture

from segpath.domain.attributes import FileAttributes
from segpath.domain.path import FsPath
from segpath.usecases.inspection import (
    PathInspector,
    get_default_inspector,
    set_default_inspector,
)
from segpath.usecases.ports import (
    AttributeQueryPort,
    CurrentDirectoryPort,
    DirectoryEntry,
    DirectoryListingPort,
)


class _RecordingAttributes(AttributeQueryPort):
    def __init__(self, results: dict[str, FileAttributes]) -> None:
        self.results = results
        self.queries: list[str] = []

    def query(self, text: str) -> FileAttributes:
        self.queries.append(text)
        return self.results.get(text, FileAttributes.NOT_FOUND)


class _FixedDirectory(CurrentDirectoryPort):
    def __init__(self, text: str) -> None:
        self.text = text

    def current_dir(self) -> str:
        return self.text


class _StaticListing(DirectoryListingPort):
    def list_dir(self, path: FsPath) -> Iterator[DirectoryEntry]:
        for name in ("b", "a"):
            yield DirectoryEntry(path=path / name, name=name, is_dir=False)


@pytest.fixture
def attributes() -> _RecordingAttributes:
    return _RecordingAttributes(
        {
            "/srv": FileAttributes.DIRECTORY,
            "/srv/data.csv": FileAttributes.FILE | FileAttributes.READONLY,
            "/srv/.env": FileAttributes.FILE | FileAttributes.HIDDEN,
        }
    )


@pytest.fixture
def inspector(attributes: _RecordingAttributes) -> PathInspector:
    return PathInspector(
        attributes=attributes,
        working_directory=_FixedDirectory("/home/user"),
        listing=_StaticListing(),
    )


def test_queries_receive_normalized_text(
    inspector: PathInspector, attributes: _RecordingAttributes
) -> None:
    assert FsPath("/srv/").is_directory(inspector)
    assert attributes.queries == ["/srv"]


def test_classification_helpers(inspector: PathInspector) -> None:
    data = FsPath("/srv/data.csv")
    assert data.exists(inspector)
    assert data.is_file(inspector)
    assert not data.is_directory(inspector)
    assert data.is_readonly(inspector)
    assert not data.is_hidden(inspector)
    assert FsPath("/srv/.env").is_hidden(inspector)


def test_empty_path_does_not_exist(inspector: PathInspector) -> None:
    empty = FsPath()
    assert not empty.exists(inspector)
    assert not empty.is_file(inspector)
    assert not empty.is_directory(inspector)


def test_current_dir_is_wrapped_without_validation(inspector: PathInspector) -> None:
    cwd = FsPath.current_dir(inspector)
    assert cwd == FsPath("/home/user")
    assert FsPath(cwd.text) == cwd


def test_list_dir_hands_off_to_listing_port(inspector: PathInspector) -> None:
    entries = list(FsPath("/srv").list_dir(inspector))
    assert [entry.path for entry in entries] == [FsPath("/srv/b"), FsPath("/srv/a")]


def test_default_inspector_is_used_when_none_given(
    inspector: PathInspector, attributes: _RecordingAttributes
) -> None:
    previous = set_default_inspector(inspector)
    try:
        assert get_default_inspector() is inspector
        assert FsPath("/srv").is_directory()
        assert attributes.queries == ["/srv"]
    finally:
        _ = set_default_inspector(previous)


def test_default_inspector_uses_local_adapters(mocker: MockerFixture) -> None:
    _ = mocker.patch("segpath.usecases.inspection._default_inspector", None)
    default = get_default_inspector()

    from segpath.adapters.local import LocalAttributeQuery

    assert isinstance(default.attributes, LocalAttributeQuery)
    assert get_default_inspector() is default


def test_ports_are_runtime_checkable(inspector: PathInspector) -> None:
    assert isinstance(inspector.attributes, AttributeQueryPort)
    assert isinstance(inspector.working_directory, CurrentDirectoryPort)
    assert isinstance(inspector.listing, DirectoryListingPort)

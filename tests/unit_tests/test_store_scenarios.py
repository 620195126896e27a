"""
End-to-end walkthroughs of typical test-double usage against a real clock.
"""

from datetime import datetime

import pytest

from object_store import EntryNotFoundError, ObjectStore, WrongKindError


@pytest.fixture
def drive():
    return ObjectStore(root_folder_id="my-drive")


def test_file_at_root(drive):
    """Test creating a file at the root of a named drive"""
    file = drive.create_file("foo.txt")
    assert file.parent_id == "my-drive"
    assert file.size == 0
    assert file.type == "file"


def test_file_with_content(drive):
    """Test creating a file with content"""
    assert drive.create_file("foo.txt", content="Hello, world!").size == 13


def test_deleting_folder_removes_its_files(drive):
    """Test deleting a folder removes the files inside it"""
    folder = drive.create_folder("foo")
    bar = drive.create_file("bar.txt", parent_id=folder.id)
    drive.delete_folder(folder.id)
    with pytest.raises(EntryNotFoundError):
        drive.get_file(bar.id)


def test_copy_into_other_folder(drive):
    """Test copying a file between folders"""
    file = drive.create_file("foo.txt", content="Hello, world!")
    other = drive.create_folder("other")
    copy = drive.copy_file(file.id, parent_id=other.id, name="baz.txt")
    assert copy.id != file.id
    assert copy.name == "baz.txt"
    assert (copy.size, copy.type) == (file.size, file.type)
    assert copy.parent_id == other.id
    assert drive.get_file(file.id) == file


def test_unknown_parent(drive):
    """Test creating under an unknown parent"""
    with pytest.raises(EntryNotFoundError) as exc_info:
        drive.create_file("foo.txt", parent_id="nonexistent")
    assert "nonexistent" in str(exc_info.value)


def test_file_as_parent(drive):
    """Test creating under a file"""
    file = drive.create_file("a.txt")
    with pytest.raises(WrongKindError, match="is not a folder"):
        drive.create_folder("bar", parent_id=file.id)


def test_every_update_moves_modified_at_forward(drive):
    """Test each update moves modified_at forward"""
    folder = drive.create_folder("docs")
    file = drive.create_file("a.txt")
    history = [file]
    history.append(drive.update_file(file.id, name="b.txt"))
    history.append(drive.update_file(file.id, content="x"))
    history.append(drive.update_file(file.id, parent_id=folder.id))
    stamps = [datetime.fromisoformat(r.modified_at) for r in history]
    assert stamps == sorted(stamps)
    assert len(set(stamps)) == len(stamps)
    assert all(r.created_at == file.created_at for r in history)


def test_records_serialize_to_plain_dicts(drive):
    """Test records dump to plain dictionaries"""
    folder = drive.create_folder("docs")
    drive.create_file("a.txt", parent_id=folder.id, content=b"\x00\x01")
    data = drive.get_folder(folder.id).model_dump()
    assert data["type"] == "folder"
    assert data["entries"][0]["size"] == 2
    assert set(data) == {"id", "name", "type", "parent_id", "created_at", "modified_at", "entries"}

"""Tests for directory operations"""
import os
import pytest
from pathlib import Path
from unittest.mock import patch

from projfs.core import directories
from projfs.core.files import read_file_text, write_file
from projfs.core.inputs import CopyInput, DirectoryInput, FileWriteInput
from projfs.utils.exceptions import NotFoundError, OperationError

def test_make_directory_creates_directory(project_root):
    """Test creating a directory"""
    directories.make_directory(DirectoryInput(project_root, "/testDir"))
    assert (Path(project_root) / "testDir").is_dir()

def test_make_directory_creates_parents(project_root):
    """Missing intermediate directories are created"""
    directories.make_directory(DirectoryInput(project_root, "/a/b/c"))
    assert (Path(project_root) / "a" / "b" / "c").is_dir()

def test_make_directory_twice(project_root):
    """Creating an existing directory is not an error"""
    directories.make_directory(DirectoryInput(project_root, "/existingDir"))
    directories.make_directory(DirectoryInput(project_root, "/existingDir"))
    assert (Path(project_root) / "existingDir").is_dir()

def test_make_directory_file_in_the_way(project_root):
    """A file at the path is wrapped into OperationError"""
    (Path(project_root) / "blocker").write_text("x")
    with pytest.raises(OperationError) as excinfo:
        directories.make_directory(DirectoryInput(project_root, "/blocker"))
    assert "blocker" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)

def test_make_directory_permission_error(project_root):
    """Other OS failures carry the original message"""
    with patch('pathlib.Path.mkdir', side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(OperationError, match="Permission denied"):
            directories.make_directory(DirectoryInput(project_root, "/locked"))

def test_make_directory_unknown_error(project_root):
    """A failure without a message becomes 'Unknown Error'"""
    with patch('pathlib.Path.mkdir', side_effect=OSError()):
        with pytest.raises(OperationError, match="Unknown Error"):
            directories.make_directory(DirectoryInput(project_root, "/odd"))

def test_list_directories_excludes_files(project_root):
    """Only directories are listed"""
    directories.make_directory(DirectoryInput(project_root, "/dir1"))
    directories.make_directory(DirectoryInput(project_root, "/dir2"))
    write_file(FileWriteInput(project_root, "/file1.txt", "test"))

    dirs = directories.list_directories(DirectoryInput(project_root, "/"))
    assert sorted(dirs) == ["dir1", "dir2"]

def test_list_directories_not_recursive(project_root):
    directories.make_directory(DirectoryInput(project_root, "/outer/inner"))
    assert directories.list_directories(DirectoryInput(project_root, "/")) == ["outer"]

def test_list_directories_skips_symlinks(project_root):
    """Symlinks to directories are not reported as directories"""
    directories.make_directory(DirectoryInput(project_root, "/real"))
    os.symlink(Path(project_root) / "real", Path(project_root) / "link")
    assert directories.list_directories(DirectoryInput(project_root, "/")) == ["real"]

def test_list_directories_missing_path(project_root):
    with pytest.raises(NotFoundError):
        directories.list_directories(DirectoryInput(project_root, "/nope"))

def test_remove_directory_recursive(project_root):
    """Test removing a directory with contents"""
    directories.make_directory(DirectoryInput(project_root, "/dirToRemove/sub"))
    write_file(FileWriteInput(project_root, "/dirToRemove/sub/f.txt", "data"))

    directories.remove_directory(DirectoryInput(project_root, "/dirToRemove"))
    assert not (Path(project_root) / "dirToRemove").exists()

def test_remove_directory_missing_is_noop(project_root):
    """Removing a non-existent directory succeeds"""
    directories.remove_directory(DirectoryInput(project_root, "/nonexistent"))
    directories.remove_directory(DirectoryInput(project_root, "/nonexistent"))

def test_remove_directory_on_file(project_root):
    """A file at the path is removed too"""
    write_file(FileWriteInput(project_root, "/plain.txt", "data"))
    directories.remove_directory(DirectoryInput(project_root, "/plain.txt"))
    assert not (Path(project_root) / "plain.txt").exists()

def test_remove_directory_symlink_keeps_target(project_root):
    """Removing a symlinked directory removes only the link"""
    directories.make_directory(DirectoryInput(project_root, "/real"))
    write_file(FileWriteInput(project_root, "/real/keep.txt", "keep"))
    os.symlink(Path(project_root) / "real", Path(project_root) / "link")

    directories.remove_directory(DirectoryInput(project_root, "/link"))
    assert not os.path.lexists(Path(project_root) / "link")
    assert (Path(project_root) / "real" / "keep.txt").exists()

def test_copy_directory_preserves_contents(project_root):
    """Every file under the source is readable under the target"""
    directories.make_directory(DirectoryInput(project_root, "/sourceDir/nested"))
    write_file(FileWriteInput(project_root, "/sourceDir/test.txt", "test content"))
    write_file(FileWriteInput(project_root, "/sourceDir/nested/deep.txt", "deep"))

    directories.copy_directory(CopyInput(project_root, "/sourceDir", "/targetDir"))

    for rel in ["/test.txt", "/nested/deep.txt"]:
        assert read_file_text(DirectoryInput(project_root, "/targetDir" + rel)) == \
            read_file_text(DirectoryInput(project_root, "/sourceDir" + rel))

def test_copy_directory_missing_source(project_root):
    with pytest.raises(NotFoundError):
        directories.copy_directory(CopyInput(project_root, "/missing", "/targetDir"))
    assert not (Path(project_root) / "targetDir").exists()

def test_copy_directory_existing_target(project_root):
    """An existing target is refused by the copy primitive"""
    directories.make_directory(DirectoryInput(project_root, "/src"))
    directories.make_directory(DirectoryInput(project_root, "/dst"))
    with pytest.raises(FileExistsError):
        directories.copy_directory(CopyInput(project_root, "/src", "/dst"))

"""Test fixtures for projfs"""
import pytest
from unittest.mock import patch

@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the config layer at an empty temporary home"""
    home = tmp_path / ".config" / "projfs"
    with patch('projfs.constants.PROJFS_HOME', home), \
         patch('projfs.constants.PROJFS_CONFIG_FILE', home / "config.yaml"):
        yield home

@pytest.fixture
def project_root(tmp_path):
    """Fixture for an empty project root directory"""
    root = tmp_path / "project"
    root.mkdir()
    return str(root)

"""
Pytest configuration and shared fixtures for sdkprops tests.

Log files are redirected to a temporary directory before any sdkprops
module is imported, so the suite never writes under the real home directory.
"""
import os
import tempfile

os.environ["SDKPROPS_HOME"] = tempfile.mkdtemp(prefix="sdkprops-test-")
os.environ.pop("SDKPROPS_VERBOSE", None)

import pytest

from sdkprops.core.project import PROPERTIES_FILE
from sdkprops.lib.logger import reset_session


@pytest.fixture(autouse=True)
def fresh_logging(monkeypatch, tmp_path):
    """Isolate logger singletons and the tool config between tests."""
    monkeypatch.setenv("SDKPROPS_CONFIG", str(tmp_path / "missing-config.yaml"))
    reset_session()
    yield
    reset_session()


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def write_properties(project_dir):
    """Write raw text into the project's properties file."""
    def _write(text: str):
        path = project_dir / PROPERTIES_FILE
        path.write_text(text)
        return path
    return _write

"""Shared pytest fixtures for serverless_predeploy tests."""

# pylint: disable=missing-function-docstring

import textwrap

import pytest
import yaml

from serverless_predeploy.models.descriptor import Credentials, ServiceDescriptor

VALID_TOKEN = "11111111-2222-3333-4444-555555555555"
VALID_PROJECT = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"


@pytest.fixture
def service_dir(tmp_path, monkeypatch):
    """Empty service directory used as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_file(service_dir):
    """Create a file (and its parents) relative to the service directory."""

    def _write(relative_path, content=""):
        path = service_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def credentials():
    return Credentials(token=VALID_TOKEN, project_id=VALID_PROJECT)


@pytest.fixture
def load_descriptor(service_dir):
    """Parse a serverless.yml snippet into a ServiceDescriptor rooted at service_dir."""

    def _load(text, service_path=None):
        data = yaml.safe_load(textwrap.dedent(text)) or {}
        return ServiceDescriptor.from_dict(data, service_path=service_path or str(service_dir))

    return _load

"""Tests for service path and credential checks."""

# pylint: disable=missing-function-docstring

import pytest

from serverless_predeploy.exceptions import CredentialsError, ServicePathError
from serverless_predeploy.models.descriptor import Credentials
from serverless_predeploy.validation.preconditions import validate_credentials, validate_service_path

UUID = "11111111-2222-3333-4444-555555555555"


class TestValidateServicePath:
    """Tests for validate_service_path."""

    def test_service_path_set(self):
        validate_service_path("/srv/my-service")

    @pytest.mark.parametrize("service_path", [None, ""])
    def test_service_path_missing(self, service_path):
        with pytest.raises(ServicePathError, match="inside a service directory"):
            validate_service_path(service_path)


class TestValidateCredentials:
    """Tests for validate_credentials."""

    def test_valid_credentials(self):
        validate_credentials(Credentials(token=UUID, project_id=UUID), credential_length=36)

    def test_content_is_not_checked(self):
        validate_credentials(Credentials(token="x" * 36, project_id="#" * 36), credential_length=36)

    @pytest.mark.parametrize("token", ["x" * 35, "x" * 37, "", None, 36])
    def test_invalid_token(self, token):
        with pytest.raises(CredentialsError, match='"scwToken" or "scwProject"'):
            validate_credentials(Credentials(token=token, project_id=UUID), credential_length=36)

    @pytest.mark.parametrize("project_id", ["x" * 35, "x" * 37, None])
    def test_invalid_project(self, project_id):
        with pytest.raises(CredentialsError):
            validate_credentials(Credentials(token=UUID, project_id=project_id), credential_length=36)

    def test_too_short_and_too_long_fail_identically(self):
        messages = []
        for token in ("x" * 10, "x" * 50):
            with pytest.raises(CredentialsError) as exc_info:
                validate_credentials(Credentials(token=token, project_id=UUID), credential_length=36)
            messages.append(str(exc_info.value))

        assert messages[0] == messages[1]

    def test_configured_length(self):
        validate_credentials(Credentials(token="abcd", project_id="efgh"), credential_length=4)
        with pytest.raises(CredentialsError):
            validate_credentials(Credentials(token=UUID, project_id=UUID), credential_length=4)

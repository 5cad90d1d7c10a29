"""
GCP HTTP Cloud Function Terraform E2E Test.

Deploys the echo Cloud Function (2nd gen) with the infrastructure/gcp
Terraform module, reads its trigger URL output and calls it over HTTPS.

IMPORTANT: This test deploys REAL GCP resources and incurs costs.
Requires ECHO_GCP_PROJECT and Application Default Credentials
(GOOGLE_APPLICATION_CREDENTIALS).
Run with: pytest -m live -s

Estimated duration: 4-8 minutes
"""
import os

import pytest
import requests

from multicloud_echo import constants as CONSTANTS
from multicloud_echo.config import get_settings
from multicloud_echo.core.event import Event
from multicloud_echo.providers.gcp.invoker import fetch_id_token, invoke_http_function
from multicloud_echo.terraform_runner import TerraformRunner, copy_terraform_folder_to_temp
from multicloud_echo.util import unique_id


@pytest.fixture(scope="module")
def gcp_project():
    """Skip unless a GCP project and credentials are configured."""
    project = get_settings().GCP_PROJECT
    if not project:
        pytest.skip("ECHO_GCP_PROJECT not configured")
    if not os.environ.get("GOOGLE_APPLICATION_CREDENTIALS"):
        pytest.skip("GOOGLE_APPLICATION_CREDENTIALS not configured")
    return project


@pytest.mark.live
class TestGCPFunctionTerraformE2E:

    @pytest.fixture(scope="class")
    def deployed_function(self, gcp_project, repo_root, built_packages):
        """
        Deploy the Cloud Function and yield (function_name, trigger_url, id_token).
        """
        settings = get_settings()
        region = settings.GCP_REGION
        function_name = f"{settings.FUNCTION_NAME_PREFIX}-{unique_id()}"
        variables = {
            "function_name": function_name,
            "project": gcp_project,
            "region": region,
            "package_path": str(built_packages["gcp-http"]),
        }

        print(f"\n{'='*60}")
        print("  GCP CLOUD FUNCTION TERRAFORM E2E TEST")
        print(f"{'='*60}")
        print(f"  Project: {gcp_project}")
        print(f"  Region: {region}")
        print(f"  Function: {function_name}")
        print(f"{'='*60}\n")

        module_dir = copy_terraform_folder_to_temp(
            repo_root, f"{settings.INFRASTRUCTURE_DIR}/{CONSTANTS.GCP_INFRASTRUCTURE_MODULE}"
        )
        runner = TerraformRunner(terraform_dir=module_dir)

        try:
            runner.init_and_apply(variables=variables)
            trigger_url = runner.output("trigger_url")
            print(f"   ✓ Trigger URL: {trigger_url}")
            yield function_name, trigger_url, fetch_id_token(trigger_url)
        finally:
            print("\n🧹 Destroying GCP resources...")
            runner.destroy(variables=variables)

    def test_trigger_url_names_function(self, deployed_function):
        function_name, trigger_url, _ = deployed_function

        assert trigger_url.startswith("https://")
        assert function_name in trigger_url

    def test_echo(self, deployed_function):
        _, trigger_url, token = deployed_function

        result = invoke_http_function(trigger_url, Event("hi!", 123), id_token=token)

        assert result.status_code == 200
        assert result.body == "hi!"

    def test_empty_body_greets(self, deployed_function):
        _, trigger_url, token = deployed_function

        result = invoke_http_function(trigger_url, id_token=token)

        assert result.status_code == 200
        assert result.body == "Hello World!"

    def test_requested_failure(self, deployed_function):
        _, trigger_url, token = deployed_function

        result = invoke_http_function(trigger_url, Event("hi!", 0), id_token=token)

        assert result.status_code == 500
        assert "Failed to handle" in result.body

    def test_malformed_body_is_bad_request(self, deployed_function):
        _, trigger_url, token = deployed_function

        response = requests.post(
            trigger_url,
            data=b"not json",
            headers={"Authorization": f"Bearer {token}"},
            timeout=CONSTANTS.DEFAULT_HTTP_TIMEOUT
        )

        assert response.status_code == 400
        assert response.text == "Bad Request"

from pathlib import Path

# ==========================================
# 1. Paths
# ==========================================
PACKAGE_ROOT = Path(__file__).parent
CORE_PACKAGE_DIR = PACKAGE_ROOT / "core"
AWS_LAMBDA_FUNCTIONS_DIR = PACKAGE_ROOT / "providers" / "aws" / "lambda_functions"
GCP_CLOUD_FUNCTIONS_DIR = PACKAGE_ROOT / "providers" / "gcp" / "cloud_functions"

# Terraform module directories under Settings.INFRASTRUCTURE_DIR
AWS_INFRASTRUCTURE_MODULE = "aws"
GCP_INFRASTRUCTURE_MODULE = "gcp"

# ==========================================
# 2. Function Packaging
# ==========================================
ECHO_FUNCTION_DIR_NAME = "echo"
AWS_LAMBDA_ENTRY_FILE = "lambda_function.py"
GCP_FUNCTION_ENTRY_FILE = "main.py"
REQUIREMENTS_FILE = "requirements.txt"

AWS_LAMBDA_RUNTIME = "python3.11"
GCP_FUNCTION_RUNTIME = "python311"

# Files and directories never shipped inside a function package
PACKAGE_EXCLUDE_DIRS = {"__pycache__", ".pytest_cache"}
PACKAGE_EXCLUDE_SUFFIXES = {".pyc", ".pyo"}

# ==========================================
# 3. Invocation
# ==========================================
INVOCATION_TYPE_REQUEST_RESPONSE = "RequestResponse"
INVOCATION_TYPE_DRY_RUN = "DryRun"
ALLOWED_INVOCATION_TYPES = [INVOCATION_TYPE_REQUEST_RESPONSE, INVOCATION_TYPE_DRY_RUN]

DEFAULT_HTTP_TIMEOUT = 30  # seconds
JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

# ==========================================
# 4. Regions
# ==========================================
# Regions where Lambda is generally available
AWS_STABLE_REGIONS = [
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "eu-west-1",
    "eu-west-2",
    "eu-central-1",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-south-1",
    "ca-central-1",
    "sa-east-1",
]


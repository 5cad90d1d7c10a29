"""
Terraform CLI Wrapper.

This module provides a Python interface to Terraform for provisioning the
echo function on each cloud. The live tests use it the same way a
developer would from the shell: copy a module, init, apply with variables,
read outputs, destroy.

Usage:
    from multicloud_echo.terraform_runner import TerraformRunner, copy_terraform_folder_to_temp

    module_dir = copy_terraform_folder_to_temp(repo_root, "infrastructure/aws")
    runner = TerraformRunner(terraform_dir=module_dir)
    runner.init()
    runner.apply(variables={"function_name": "echo-abc123", "region": "eu-central-1"})
    outputs = runner.output()
    runner.destroy(variables={...})
"""

import json
import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Local state and provider caches are not copied into temp modules
_COPY_IGNORE = shutil.ignore_patterns(".terraform", "terraform.tfstate*", ".terraform.lock.hcl", "tfplan")


class TerraformError(Exception):
    """Raised when a Terraform command fails."""

    def __init__(self, command: str, return_code: int, stderr: str):
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        super().__init__(f"Terraform {command} failed (exit {return_code}): {stderr}")


def copy_terraform_folder_to_temp(root_folder: str | Path, module_path: str) -> Path:
    """
    Copy a Terraform module into a fresh temporary directory.

    Parallel tests each get their own copy, so their local state never
    collides.

    Args:
        root_folder: Repository root
        module_path: Module path relative to root_folder (e.g. "infrastructure/aws")

    Returns:
        Path to the copied module

    Raises:
        ValueError: If the module does not exist
    """
    source = Path(root_folder) / module_path
    if not source.is_dir():
        raise ValueError(f"Terraform module does not exist: {source}")

    temp_root = Path(tempfile.mkdtemp(prefix="multicloud-echo-tf-"))
    destination = temp_root / Path(module_path).name
    shutil.copytree(source, destination, ignore=_COPY_IGNORE)
    logger.debug(f"Copied Terraform module {source} -> {destination}")
    return destination


def _format_var(key: str, value: Any) -> str:
    if isinstance(value, (dict, list, bool)):
        value = json.dumps(value)
    return f"-var={key}={value}"


class TerraformRunner:
    """
    Wraps Terraform CLI commands.

    Attributes:
        terraform_dir: Path to the Terraform configuration directory
    """

    def __init__(self, terraform_dir: str | Path):
        """
        Raises:
            ValueError: If terraform_dir is empty or does not exist
        """
        if not terraform_dir:
            raise ValueError("terraform_dir is required")

        self.terraform_dir = Path(terraform_dir)

        if not self.terraform_dir.exists():
            raise ValueError(f"Terraform directory does not exist: {terraform_dir}")

    def _run_command(
        self,
        args: list[str],
        capture_output: bool = True,
        check: bool = True,
        stream_output: bool = False
    ) -> subprocess.CompletedProcess:
        """
        Run a Terraform command.

        Args:
            args: Command arguments (without 'terraform' prefix)
            capture_output: Whether to capture stdout/stderr (ignored if stream_output=True)
            check: Whether to raise on non-zero exit
            stream_output: If True, stream output to console (for long-running commands)

        Raises:
            TerraformError: If command fails and check=True
        """
        # Flags must precede positional arguments such as an output name
        cmd = ["terraform", f"-chdir={self.terraform_dir}", args[0], "-no-color"] + args[1:]
        logger.info(f"Running: {' '.join(cmd)}")

        if stream_output:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                bufsize=1
            )

            output_lines = []
            for line in process.stdout:
                print(line, end='', flush=True)
                output_lines.append(line)

            process.wait()

            result = subprocess.CompletedProcess(
                args=cmd,
                returncode=process.returncode,
                stdout=''.join(output_lines),
                stderr=None
            )
        else:
            result = subprocess.run(
                cmd,
                capture_output=capture_output,
                text=True,
                check=False
            )

        if check and result.returncode != 0:
            # Combine stdout and stderr for full error context
            error_output = ""
            if result.stdout:
                error_output += result.stdout
            if result.stderr:
                error_output += "\n" + result.stderr if error_output else result.stderr
            if not error_output:
                error_output = "No output captured"
            raise TerraformError(args[0], result.returncode, error_output)

        return result

    def init(self, upgrade: bool = False) -> None:
        """
        Initialize Terraform (download providers).

        Raises:
            TerraformError: If init fails
        """
        args = ["init", "-input=false"]
        if upgrade:
            args.append("-upgrade")

        logger.info("Initializing Terraform...")
        self._run_command(args)
        logger.info("✓ Terraform initialized")

    def validate(self) -> bool:
        """
        Validate the Terraform configuration.

        Raises:
            TerraformError: If validation fails
        """
        logger.info("Validating Terraform configuration...")
        self._run_command(["validate"])
        logger.info("✓ Configuration is valid")
        return True

    def apply(
        self,
        variables: Optional[Mapping[str, Any]] = None,
        auto_approve: bool = True
    ) -> None:
        """
        Apply the configuration with the given input variables.

        Raises:
            TerraformError: If apply fails
        """
        args = ["apply", "-input=false"]
        if auto_approve:
            args.append("-auto-approve")
        args.extend(_format_var(k, v) for k, v in (variables or {}).items())

        logger.info("Applying Terraform configuration...")
        self._run_command(args, stream_output=True)
        logger.info("✓ Apply complete")

    def init_and_apply(self, variables: Optional[Mapping[str, Any]] = None) -> None:
        self.init()
        self.apply(variables=variables)

    def destroy(
        self,
        variables: Optional[Mapping[str, Any]] = None,
        auto_approve: bool = True
    ) -> None:
        """
        Destroy all managed resources.

        Raises:
            TerraformError: If destroy fails
        """
        args = ["destroy", "-input=false"]
        if auto_approve:
            args.append("-auto-approve")
        args.extend(_format_var(k, v) for k, v in (variables or {}).items())

        logger.info("Destroying Terraform-managed resources...")
        self._run_command(args, stream_output=True)
        logger.info("✓ Destroy complete")

    def output(self, name: Optional[str] = None) -> Any:
        """
        Get Terraform outputs.

        Args:
            name: Optional specific output name (returns all if None)

        Returns:
            Dictionary of output values, or the single value if name is given

        Raises:
            TerraformError: If output command fails
        """
        args = ["output", "-json"]
        if name:
            args.append(name)

        result = self._run_command(args, capture_output=True)

        if not result.stdout.strip():
            return {}

        outputs = json.loads(result.stdout)

        # A named output is already the bare value
        if name:
            return outputs

        return {k: v.get("value") for k, v in outputs.items()}

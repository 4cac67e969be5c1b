"""Unit tests for the project builder and `sam init` runner."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from samwizard.localization import message
from samwizard.runtime import Runtime, UnknownRuntimeError
from samwizard.sdk import SdkType
from samwizard.wizard import ProjectCreationError, SamInitProjectBuilder, SamInitRunner, StepStateError


class TestSamInitProjectBuilder:
    """Test SamInitProjectBuilder."""

    def test_initial_state(self, builder):
        assert builder.runtime is None
        assert builder.sdk_type is None
        assert builder.selected_sdk is None
        assert builder.module_jdk is None

    def test_sdk_type_follows_runtime(self, builder):
        builder.set_runtime("nodejs14.x")
        assert builder.sdk_type == SdkType.NODEJS

        builder.set_runtime(Runtime("java11"))
        assert builder.sdk_type == SdkType.JAVA

    def test_unknown_runtime(self, builder):
        with pytest.raises(UnknownRuntimeError):
            builder.set_runtime("python2.7")

    def test_default_catalog(self):
        builder = SamInitProjectBuilder()
        builder.set_runtime("python3.12")

        assert builder.sdk_type == SdkType.PYTHON

    def test_init_command(self, builder):
        builder.set_runtime("python3.9")
        builder.set_sam_executable("/usr/local/bin/sam")

        command = builder.init_command("hello", Path("/tmp/projects"))

        assert command[:3] == ["/usr/local/bin/sam", "init", "--no-interactive"]
        assert command[command.index("--runtime") + 1] == "python3.9"
        assert command[command.index("--dependency-manager") + 1] == "pip"
        assert command[command.index("--name") + 1] == "hello"
        assert command[command.index("--output-dir") + 1] == "/tmp/projects"

    def test_init_command_requires_runtime(self, builder):
        builder.set_sam_executable("/usr/local/bin/sam")

        with pytest.raises(ValueError, match="Runtime"):
            builder.init_command("hello", "/tmp")

    def test_init_command_requires_executable(self, builder):
        builder.set_runtime("java11")

        with pytest.raises(ValueError, match="SAM CLI"):
            builder.init_command("hello", "/tmp")


class TestSamInitRunner:
    """Test SamInitRunner."""

    @pytest.fixture
    def committed_context(self, step, context):
        step.sam_executable_field.set_text("/usr/local/bin/sam")
        step.select_runtime("nodejs14.x")
        step.validate()
        step.commit_to_configuration()
        return context

    def test_requires_committed_builder(self, context):
        with pytest.raises(StepStateError):
            SamInitRunner(context).run()

    @patch("subprocess.run")
    def test_run_success(self, mock_run, committed_context):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")

        project_dir = SamInitRunner(committed_context).run()

        assert project_dir == Path("/tmp/projects") / "hello"
        command = mock_run.call_args[0][0]
        assert command[command.index("--runtime") + 1] == "nodejs14.x"
        assert command[command.index("--dependency-manager") + 1] == "npm"

    @patch("subprocess.run")
    def test_run_failure(self, mock_run, committed_context):
        mock_run.return_value = MagicMock(returncode=1, stdout="", stderr="Error: boom")

        with pytest.raises(ProjectCreationError, match="boom") as exc_info:
            SamInitRunner(committed_context).run()

        assert exc_info.value.returncode == 1

    @patch("subprocess.run")
    def test_run_cannot_execute(self, mock_run, committed_context):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="sam", timeout=1)

        with pytest.raises(ProjectCreationError, match="Could not execute"):
            SamInitRunner(committed_context, timeout=1).run()


class TestLocalization:
    def test_known_key(self):
        assert message("lambda.run_configuration.sam.not_specified") == "SAM CLI executable not specified"

    def test_unknown_key_returns_key(self):
        assert message("no.such.key") == "no.such.key"

    def test_arguments(self):
        assert message("sam.init.execution_error", "boom") == "Could not execute `sam init`: boom"

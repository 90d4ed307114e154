"""
Unit tests for SubmissionService.
"""

import os
from pathlib import Path

import pytest

from exec_client.application.services import SubmissionService
from exec_client.domain.errors import (
    InvalidRequestError,
    RemoteSubmissionError,
    TransportUnavailableError,
)
from exec_client.domain.value_objects import ExecutionHandle, SubmitResponse, SubmitStatus


def running(process_id: int) -> SubmitResponse:
    return SubmitResponse(SubmitStatus.RUNNING, ExecutionHandle(process_id))


class TestSubmit:
    """Tests for SubmissionService.submit()."""

    @pytest.mark.parametrize(
        "parameters,environment",
        [
            ([], []),
            (["ls"], ["HOME=/root"]),
            (["prog", "--b", "--a", "", "--b"], ["Z=1", "A=", "PATH=/bin:/usr/bin", "Z=2"]),
            (["ünïcode", "with space"], ["EQ=a=b=c"]),
        ],
    )
    def test_request_preserves_order_and_content(
        self, context, fake_service, parameters, environment
    ):
        fake_service.submit_answers.append(running(7))

        SubmissionService(context).submit("/bin/prog", parameters, environment)

        request = fake_service.requests[0]
        assert list(request.parameters) == parameters
        assert list(request.environment) == environment

    def test_running_returns_handle(self, context, fake_service):
        fake_service.submit_answers.append(running(42))

        handle = SubmissionService(context).submit("/bin/true")

        assert handle == ExecutionHandle(42)

    def test_request_carries_own_pid_and_command(self, context, fake_service):
        fake_service.submit_answers.append(running(1))

        SubmissionService(context).submit("/bin/true", ["true"], [])

        request = fake_service.requests[0]
        assert request.process_id == os.getpid()
        assert request.command == "/bin/true"

    def test_launch_failed_raises(self, context, fake_service):
        fake_service.submit_answers.append(
            SubmitResponse(SubmitStatus.LAUNCH_FAILED, ExecutionHandle(0))
        )

        with pytest.raises(RemoteSubmissionError, match="Failed to launch the process"):
            SubmissionService(context).submit("/bin/missing")

        assert "get_result" not in fake_service.calls

    def test_unknown_status_raises(self, context, fake_service):
        fake_service.submit_answers.append(
            SubmitResponse(SubmitStatus.UNKNOWN, ExecutionHandle(0))
        )

        with pytest.raises(RemoteSubmissionError):
            SubmissionService(context).submit("/bin/true")

    def test_transport_error_propagates(self, context, fake_service):
        fake_service.submit_answers.append(TransportUnavailableError("fake:0", "reset"))

        with pytest.raises(TransportUnavailableError, match="Failed to send request"):
            SubmissionService(context).submit("/bin/true")

    def test_empty_command_is_rejected_before_sending(self, context, fake_service):
        with pytest.raises(InvalidRequestError):
            SubmissionService(context).submit("")

        assert fake_service.calls == []


class TestCompanionPath:
    """Tests for the per-call companion socket path."""

    def test_path_lives_in_fresh_temp_dir(self, context, fake_service, settings):
        fake_service.submit_answers.extend([running(1), running(2)])
        service = SubmissionService(context)

        service.submit("/bin/true")
        service.submit("/bin/true")

        first, second = (Path(r.sockpath) for r in fake_service.requests)
        assert first.name == settings.companion_socket_name
        assert first.parent.name.startswith(settings.companion_dir_prefix)
        assert first.parent != second.parent

    def test_temp_dir_is_removed_after_the_call(self, context, fake_service):
        fake_service.submit_answers.append(running(1))

        SubmissionService(context).submit("/bin/true")

        assert not Path(fake_service.requests[0].sockpath).parent.exists()

    def test_temp_dir_exists_while_request_is_sent(self, context, fake_service):
        seen = {}
        original = fake_service.exec_command

        def exec_command(request):
            seen["exists"] = Path(request.sockpath).parent.is_dir()
            return original(request)

        fake_service.exec_command = exec_command
        fake_service.submit_answers.append(running(1))

        SubmissionService(context).submit("/bin/true")

        assert seen["exists"] is True

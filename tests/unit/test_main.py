"""Tests for operator startup and cleanup."""

from __future__ import annotations

from unittest.mock import patch

import kopf

from lokistack_operator import health, main


class TestConfigure:
    """Test cases for the kopf startup handler."""

    @patch("lokistack_operator.main.threading.Thread")
    @patch("lokistack_operator.main.make_server")
    @patch("lokistack_operator.main.initialize_tracing")
    @patch("lokistack_operator.main.structured_logging.setup_structured_logging")
    def test_configure(self, mock_logging, mock_tracing, mock_make_server, mock_thread, monkeypatch):
        monkeypatch.setenv("METRICS_PORT", "9090")
        monkeypatch.setenv("K8S_REQUEST_TIMEOUT_SECONDS", "5")
        settings = kopf.OperatorSettings()
        health.mark_not_ready()

        try:
            main.configure(settings=settings)

            mock_logging.assert_called_once_with()
            mock_tracing.assert_called_once_with()
            assert settings.posting.level == 0
            assert settings.networking.request_timeout == 5.0
            assert settings.execution.max_workers == 4
            assert isinstance(settings.persistence.progress_storage, kopf.AnnotationsProgressStorage)
            assert mock_make_server.call_args[0][:2] == ("", 9090)
            mock_thread.return_value.start.assert_called_once_with()
            assert health._ready.is_set()
        finally:
            main.shutdown()

        mock_make_server.return_value.shutdown.assert_called_once_with()
        assert not health._ready.is_set()
        assert main._server is None

    def test_shutdown_without_server(self):
        with patch.object(main, "_server", None):
            main.shutdown()

        assert not health._ready.is_set()

"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from se_transport.adapters.api_request_logger import (
    log_api_request,
    redact_params,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TRANSPORT_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("TRANSPORT_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TRANSPORT_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("TRANSPORT_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TRANSPORT_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("TRANSPORT_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestRedactParams:
    """Tests for redact_params function."""

    def test_when_access_id_present_then_it_is_masked(self) -> None:
        """Given a ResRobot accessId, when redacting, then the key is hidden."""
        result = redact_params({"accessId": "secret", "input": "Ånge"})

        assert result == {"accessId": "***REDACTED***", "input": "Ånge"}

    def test_when_no_params_then_returns_empty_dict(self) -> None:
        """Given no params, when redacting, then an empty dict is returned."""
        assert redact_params(None) == {}


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_params_then_logs_full_url(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled with params, when calling, then logs URL with sorted params."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", params={"limit": 10, "format": "json"})

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert "GET https://example.com/api?format=json&limit=10" in call_args

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_url_has_existing_params_then_appends_params(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given URL with existing params, when adding more params, then appends with &."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api?existing=1", params={"new": 2})

        call_args = mock_logger.info.call_args[0][0]
        assert "https://example.com/api?existing=1&new=2" in call_args

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_logging_with_api_key_param_then_redacts_it(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given an accessId query parameter, when logging, then the key never appears."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://api.resrobot.se/v2.1/trip", params={"accessId": "abc123"})

        call_args = mock_logger.info.call_args[0][0]
        assert "***REDACTED***" in call_args
        assert "abc123" not in call_args

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_logging_with_headers_then_user_agent_is_kept(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a User-Agent header, when logging, then the header is logged as is."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", headers={"User-Agent": "se-transport"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "se-transport" in call_args

    @patch("se_transport.adapters.api_request_logger.should_log_requests")
    @patch("se_transport.adapters.api_request_logger.logger")
    def test_when_logging_with_authorization_header_then_redacts_it(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given Authorization header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request(
            "GET", "https://example.com/api", headers={"Authorization": "Bearer secret-token"}
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "***REDACTED***" in call_args
        assert "secret-token" not in call_args

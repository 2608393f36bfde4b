"""Tests for error handling"""
import json
from unittest.mock import Mock, patch

import pytest
from fastapi import HTTPException
from fastapi.responses import JSONResponse

from review_service.core.errors import (
    ErrorResponse,
    NotFoundError,
    StoreError,
    ValidationError,
    error_response_handler,
    http_exception_handler,
)


class TestErrorResponse:
    """Test ErrorResponse exception hierarchy"""

    def test_error_response_creation(self):
        error = ErrorResponse("Something went wrong", status_code=400)
        assert error.message == "Something went wrong"
        assert error.status_code == 400
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_error_response_default_status_code(self):
        assert ErrorResponse("Bad request").status_code == 400

    def test_taxonomy_status_codes(self):
        assert ValidationError("Invalid email format").status_code == 400
        assert NotFoundError("Review not found").status_code == 404
        assert StoreError().status_code == 500
        assert isinstance(StoreError(), ErrorResponse)


class TestErrorHandlers:
    """Test error handler functions"""

    @pytest.mark.asyncio
    async def test_error_response_handler(self):
        mock_request = Mock()
        mock_request.method = "POST"
        error = NotFoundError("Review not found", details={"review_id": "123"})

        with patch('review_service.core.errors.logger') as mock_logger:
            response = await error_response_handler(mock_request, error)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 404
        assert json.loads(response.body) == {"error": "Review not found", "details": {"review_id": "123"}}
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_store_errors_logged_as_errors(self):
        mock_request = Mock()

        with patch('review_service.core.errors.logger') as mock_logger:
            response = await error_response_handler(mock_request, StoreError("Server error while fetching reviews"))

        assert response.status_code == 500
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_http_exception_handler(self):
        with patch('review_service.core.errors.logger'):
            response = await http_exception_handler(Mock(), HTTPException(status_code=405, detail="Nope"))

        assert response.status_code == 405
        assert json.loads(response.body) == {"error": "Nope", "details": {}}

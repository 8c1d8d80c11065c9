"""API tests package.

End-to-end tests for HTTP endpoints using TestClient.
Tests the complete request/response cycle including:
- Stream framing and headers
- Parameter resolution from query and headers
- Problem Details error responses
"""

"""Test suite for the Tickstream service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain values, ticker, encoder, transport, session driver,
  streaming response, middleware, config, container
- api/: API endpoint tests - HTTP endpoints end-to-end through TestClient
"""

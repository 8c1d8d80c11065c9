"""Infrastructure layer - Adapters for domain protocols.

Structure:
- sse/: SSE wire encoder and ASGI byte transport
- logging/: structlog-backed LoggerProtocol adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

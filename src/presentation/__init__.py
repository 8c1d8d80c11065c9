"""Presentation layer - HTTP endpoints and ASGI concerns.

Structure:
- routers/: FastAPI routers (system endpoints, event stream) and RFC 7807
  exception handlers
- responses/: EventStreamResponse (runs a session against an ASGI connection)
- api/middleware/: Request tracing middleware

The presentation layer resolves request inputs and hands them to the
application layer; it contains NO streaming logic.
"""

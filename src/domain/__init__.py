"""Domain layer - Pure streaming logic.

This layer contains the stream event types, value objects, protocols
(ports), and stream errors. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- events/: Event units emitted on the wire
- value_objects/: Immutable stream configuration and resolved parameters
- validators/: Lenient parsing of client-supplied values
- protocols/: Ports implemented by infrastructure (logger, encoder, transport)
- errors/: Stream failure exceptions
"""

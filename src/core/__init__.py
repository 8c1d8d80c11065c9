"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Settings (pydantic-settings) and internal constants
- Environment enum
- Ticker (periodic timer for emission loops)
- Dependency container (composition root)

The core module has NO dependencies on application, infrastructure or
presentation code outside the container's lazy factory imports.
"""

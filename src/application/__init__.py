"""Application layer - Use cases and orchestration.

Structure:
- services/: Per-connection stream session driver

The application layer orchestrates domain values, a timer, and an encoder
port; it contains no transport or framework code.
"""

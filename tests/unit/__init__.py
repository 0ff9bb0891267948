"""Unit tests for individual components in isolation.

Coverage:
    - config: Environment-driven settings and API key validation
    - models: Content block shaping
    - relay: Upstream request construction with a mocked SDK client
    - ui: Widget submit logic with a fake transcript

Uses mocks for external services.
"""

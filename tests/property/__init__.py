# tests/property/__init__.py
"""Property-based tests for sinkmock.

Property-based testing validates invariants that must hold for ALL scripts,
not just the scenarios we think of.

Test categories:
- test_sink_mock_state_machine: SinkMock against a reference model
- test_sink_mock_properties: buffer counting and protocol properties
- test_fuse_last_properties: latch-on-last adapter shape
"""

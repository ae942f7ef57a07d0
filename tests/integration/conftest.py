"""Integration test fixtures.

Integration tests run fully in-process (TestClient, temporary files), so
no external services are needed; shared fixtures live in tests/conftest.py.
"""

"""
Test fixtures for Validator Group.

Shared fixtures live in tests/conftest.py:
- SimpleGroup / AgeGroup: small sample groups
- json_handler: JSONHandler factory
- png_file / text_file / upload_meta: upload metadata backed by real files
"""

"""
Integration tests for Validator Group.

Test components together:
- Groups validated against JSON payloads end to end
- FastAPI endpoints guarded by validated_by() (TestClient)
"""

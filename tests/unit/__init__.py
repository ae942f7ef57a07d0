"""
Unit tests for Validator Group.

Test individual components in isolation:
- Validation group registry and engine
- Reference filters and validators
- Data handlers (JSON, form, upload)
- Models (field spec, outcome, uploaded file)
- Metrics recording
"""

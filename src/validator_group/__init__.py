"""
Validator Group: declarative field validation for request payloads.

Groups declare named fields, each with:
- An ordered chain of filters (value transforms)
- An ordered chain of validators (predicate checks)
- A required/optional flag

Values are pulled from a pluggable data handler (JSON body, form post,
multipart upload metadata) so the same rules apply to any transport.
"""

__version__ = "0.1.0"

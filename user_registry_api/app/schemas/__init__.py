"""
Pydantic schema definitions for API payloads.

Request bodies arrive as loose mappings and are validated by the
store; these models describe the records the API returns.
"""

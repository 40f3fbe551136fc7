"""
Extract Layer - Pure I/O to the GitHub REST API

This layer resolves which URL to fetch and fetches it, nothing more.
- No imports from transformation or orchestration layers
- Returns raw response bodies as text
- No retries; transport errors propagate to the caller
"""

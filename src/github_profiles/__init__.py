"""
GitHub Profiles Adapter

Lets a relational-query host read GitHub user profiles as flat rows.
- extract: URL resolution and HTTP fetching (pure I/O)
- transformation: response normalization, row enrichment, schema descriptor
- orchestration: the sync / query / search boundary the host calls
"""

__version__ = "1.0.0"

"""
VA Hub
A job marketplace connecting employers with virtual assistants.

Architecture:
- FastAPI handlers over a single relational database (raw SQL)
- Admin moderation of jobs and users, with an audit log
- Python client with per-view state and message polling
"""

__version__ = "1.0.0"

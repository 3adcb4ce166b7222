"""
Pieces shared by every resource package: the read-only database adapter,
row projections, the error taxonomy and its JSON rendering, and
environment settings. SQL for a resource lives in that resource's
`repository.py`.
"""

"""
Application layer for workout template exercise entries.

This package contains:
- ports/: Repository interfaces (template exercise rows, exercise catalog)
- use_cases/: Entry-list editor and the load/save/duplicate workflows
"""

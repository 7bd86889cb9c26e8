"""
Utility modules for ReviewStats.

Cross-cutting concerns:
- Storage: Report export to CSV and JSON
"""

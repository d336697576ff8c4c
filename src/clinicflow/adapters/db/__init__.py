"""Database plumbing shared by the SQL adapters."""

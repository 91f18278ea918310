"""specreport application layer."""

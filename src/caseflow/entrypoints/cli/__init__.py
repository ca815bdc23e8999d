"""Command-line interface for CASEFLOW."""

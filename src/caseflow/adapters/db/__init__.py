"""Relational persistence plumbing: metadata, column types, engines, migrations."""

"""Alembic migration scripts for CASEFLOW (see `caseflow.config.build_alembic_config`)."""

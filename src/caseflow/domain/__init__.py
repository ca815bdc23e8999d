"""Domain layer for CASEFLOW.

Contains business rules: the `Case` entity, its value objects (status and
priority), the status-transition rule table, and domain errors. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `caseflow.adapters` or `caseflow.entrypoints`.
"""

"""Interfaces (application boundary) for CASEFLOW.

Defines framework-free application contracts: the case repository port, the
unit of work, clocks and ID generators. Business rules stay out of this package.

Dependency rule: this package may import `caseflow.domain` types for its
signatures but nothing from `caseflow.service_layer`, `caseflow.adapters` or
`caseflow.entrypoints`.
"""

"""Bootstrap (composition root) for CASEFLOW.

Assembles the application at runtime: picks the database, id scheme and clock,
binds them to the service-layer handlers and hands back a ready message bus.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain
  wiring details).
- This package may import: `caseflow.adapters`, `caseflow.service_layer`,
  `caseflow.interfaces`, `caseflow.domain`, and `caseflow.config`.
- Inner layers must not import `caseflow.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]

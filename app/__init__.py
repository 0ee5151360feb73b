"""
Calculator API with error classification and telemetry interception.

Application package root. Arithmetic is trivial; the interesting part
is how failures are classified, reported and logged.

Layers:
    - domain: Calculator operations and the closed ErrorKind set.
    - infrastructure: Telemetry sink adapters (Sentry, in-memory).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (error classification, request
      interception, logging).
"""

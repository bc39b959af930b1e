"""
Source Code Root Module

Sales trend service: per-product sales predictions computed from the
order ledger.

Layer Structure:
- Domain: Sales entities, trend estimation and seasonality rules
- Application: Use cases and DTOs
- Infrastructure: MongoDB ledger access and health probes
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, entry points and configuration
"""

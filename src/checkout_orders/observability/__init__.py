"""
checkout_orders.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.

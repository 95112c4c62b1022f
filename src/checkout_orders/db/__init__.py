"""
checkout_orders.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM records, engine/session setup, and the Order repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside this package imports SQLAlchemy types; callers see domain
# objects, `OrderView` dicts and the errors in `db.repositories.errors`.

"""PostgreSQL schema constants.

Tables are grouped into logical schemas:
- ecommerce: storefront data owned by tenants (discount rules)
"""

# E-commerce domain schema
ECOMMERCE_SCHEMA = "ecommerce"

# Default search path for SQLAlchemy connections
DEFAULT_SEARCH_PATH = f"public,{ECOMMERCE_SCHEMA}"

# All managed schemas (for Alembic configuration)
MANAGED_SCHEMAS = frozenset({
    "public",
    ECOMMERCE_SCHEMA,
})

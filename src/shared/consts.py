from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Collections backing the order ledger
PRODUCTS_COLLECTION = "products"
ORDERS_COLLECTION = "orders"
ORDER_ITEMS_COLLECTION = "order_items"

REQUIRED_COLLECTIONS = (
    PRODUCTS_COLLECTION,
    ORDERS_COLLECTION,
    ORDER_ITEMS_COLLECTION,
)

# Orders counted as sales when building daily series
DEFAULT_ORDER_STATUSES = ("delivered", "shipped", "pending")

from .setup import setup_observability
from .metrics import (
    product_mirror_total,
    product_mirror_compensation_total,
    object_store_operations_total
)

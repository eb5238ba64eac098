from prometheus_client import Counter

# Business Metrics
product_mirror_total = Counter(
    "product_mirror_total",
    "Create flows that tried to mirror a product to object storage",
    ["outcome"] # Labels: 'mirrored', 'failed'
)

product_mirror_compensation_total = Counter(
    "product_mirror_compensation_total",
    "Compensations run after a failed create flow",
    ["step_name"] # Labels: 'insert_row', 'upload_object'
)

object_store_operations_total = Counter(
    "object_store_operations_total",
    "Object storage calls issued by the service",
    ["operation", "outcome"] # operation='put'|'delete', outcome='ok'|'error'
)

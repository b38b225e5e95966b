from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter('lawsuits_requests_total', 'Total HTTP requests', ['method', 'endpoint', 'status'])
REQUEST_LATENCY = Histogram('lawsuits_request_latency_seconds', 'Request latency in seconds', ['endpoint'])
DETAIL_LOOKUPS = Counter('lawsuits_detail_lookups_total', 'Lawsuit detail lookups', ['outcome'])
LIST_RESULTS = Histogram(
    'lawsuits_list_page_size', 'Items returned per list page',
    buckets=(0, 1, 5, 10, 20, 50, 100),
)

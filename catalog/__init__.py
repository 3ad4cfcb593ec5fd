"""Product catalog: JSON-file persistence for product records plus a small FastAPI surface."""

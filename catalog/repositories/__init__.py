"""
Persistence adapters.

These modules encapsulate how product records are stored/retrieved (today a
single JSON file). Routers and scripts depend on ProductRepository rather than
touching the JSON file.
"""

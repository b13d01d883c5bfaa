"""
HTTP layer: FastAPI routers and dependency providers.
"""

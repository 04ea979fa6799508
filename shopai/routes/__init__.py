"""
FastAPI routers for all API endpoints.

Each module defines a router for a specific area (products, recommendations, health).
Routes only translate HTTP to WorkflowController calls; all state lives in the controller.
"""

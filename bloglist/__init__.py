"""
Blog List Backend — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the blog/user domain (models, repositories, invariants), the MongoDB
document store adapter, and the dependency injection wiring.
"""

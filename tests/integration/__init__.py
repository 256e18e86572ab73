"""Integration tests for the FastAPI application.

Exercises the control routes, token issuance and webhook ingress through
httpx's ASGI transport, with a fake Stream Chat client behind the registry.
"""

"""Core gameplay primitives (root word selection, submission outcomes, events, and the engine).

Kept free of FastAPI and Redis concerns so it can be reused by API routes, the play script, and tests.
"""

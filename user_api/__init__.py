"""
User records API.

Stores each user as a single JSON object in S3-compatible blob storage and
exposes create/fetch/update handlers, wired to FastAPI routes and AWS
Lambda entry points.
"""

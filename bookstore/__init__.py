"""Online Bookstore REST service.

This package exposes the service, repository and model modules used by
the FastAPI application in `bookstore.main`. Individual modules contain
the concrete implementations and documentation.
"""

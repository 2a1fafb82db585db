"""
Application package for the User Registry API.

``main.create_app`` assembles the FastAPI application from the
``api``, ``core``, ``schemas`` and ``services`` subpackages.
"""

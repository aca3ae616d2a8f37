"""
Service layer abstraction.

Each service encapsulates the business rules for one entity on top of
its store.  Services raise the errors from ``core.exceptions`` and
leave HTTP concerns to the API handlers.
"""

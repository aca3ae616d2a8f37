"""
API package containing versioned routes and the shared error handlers.
"""

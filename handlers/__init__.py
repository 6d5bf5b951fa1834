"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler parses the request, delegates to the
appropriate Repository, and maps the result to a status code.
No SQL lives here.
"""

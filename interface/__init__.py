"""
Interface Layer
- Exposes the use cases over HTTP
- Maps domain errors to HTTP responses
- Wires dependencies for each request
"""

"""
Command pattern implementation for the site recovery backend.

Commands keep control plane operations independent of the API layer so
they can be driven from HTTP handlers, scripts, or tests alike.
"""

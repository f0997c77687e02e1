"""
hello-mvc - web controller examples on FastAPI.

Demonstrates request-parameter binding, request mapping styles and
response-construction strategies, plus a small item service with
server-rendered views.
"""

__version__ = "1.0.0"

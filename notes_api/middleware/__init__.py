# Middleware package init
"""
Notes API — Middleware Package
===============================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID: assigns the correlation id every later log line and error
      body carries
    - Logging: one access line per request with status and duration
    - CORS: FastAPI's CORSMiddleware, origins from settings.cors_origins
"""

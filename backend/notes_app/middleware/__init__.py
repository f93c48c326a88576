# Middleware package init
"""
Notes App Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every later log line can include the correlation id
    2. Logging: records status and duration once the response is produced
    3. CORS: FastAPI's CORSMiddleware, answers preflight requests
"""

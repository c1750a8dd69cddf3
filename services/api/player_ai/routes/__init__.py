"""API router package.

Most code should import the composed router via:

    from player_ai.routes import router

The actual composition lives in `player_ai/routes/api_router.py`.
"""

from .api_router import router

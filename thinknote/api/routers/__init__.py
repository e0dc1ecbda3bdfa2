"""API routers."""

from thinknote.api.routers.audio import router as audio_router
from thinknote.api.routers.meta import router as meta_router
from thinknote.api.routers.summaries import router as summaries_router
from thinknote.api.routers.tutor import router as tutor_router

__all__ = ["audio_router", "meta_router", "summaries_router", "tutor_router"]

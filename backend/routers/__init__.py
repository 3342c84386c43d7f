from .faq import router as faq_router
from .operators import router as operator_router

__all__ = ["faq_router", "operator_router"]

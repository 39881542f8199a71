from .locale import router as locale_router

__all__ = ["locale_router"]

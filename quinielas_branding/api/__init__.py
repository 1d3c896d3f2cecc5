from .branding import router as branding_router

__all__ = ["branding_router"]

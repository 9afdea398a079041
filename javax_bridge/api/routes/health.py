"""Health check endpoints"""
from fastapi import APIRouter
from javax_bridge.config import settings
from javax_bridge.services.transform.builder import INPUTS_DIR

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@router.get("/info")
async def info():
    """Service info endpoint"""
    from javax_bridge import __version__
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "description": "Converts between placeholder scripts and runnable Java classes",
        "conventions": {
            "scriptExtension": settings.SCRIPT_EXTENSION,
            "argumentFiles": f"{INPUTS_DIR}/<key>.json",
            "defaultClassName": settings.DEFAULT_CLASS_NAME,
        }
    }

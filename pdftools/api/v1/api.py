from fastapi import APIRouter

from pdftools.api.v1.endpoints import images, info, merge, split

# Create the API router without a prefix since it will be added in main.py
api_router = APIRouter()

# Include routers with their respective prefixes
api_router.include_router(split.router, prefix="/split", tags=["split"])
api_router.include_router(merge.router, prefix="/merge", tags=["merge"])
api_router.include_router(images.router, prefix="/images", tags=["images"])
api_router.include_router(info.router, prefix="/info", tags=["info"])

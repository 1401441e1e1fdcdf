from fastapi import APIRouter

from wedding_photos.api.endpoints import album_orders, comments, events, likes, photos

api_router = APIRouter()

api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(photos.router, tags=["photos"])
api_router.include_router(likes.router, prefix="/photos", tags=["likes"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(album_orders.router, tags=["album-orders"])

from fastapi import APIRouter

from app.api.v1.endpoints import data, recipes, users

api_router = APIRouter()
api_router.include_router(recipes.router, prefix="/recipes", tags=["Recipes"])
api_router.include_router(data.router, prefix="/data", tags=["Data"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])

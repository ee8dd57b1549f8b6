# src/recruiting_api/home_routes.py

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


# "/api" and "/api/" both answer here.
@router.get("")
@router.get("/")
async def home() -> Dict[str, str]:
    return {"message": "Online Recruiting API is running!"}

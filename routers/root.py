"""
Dummy app — Root route
  GET /   fixed plaintext status line
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from config import ROOT_MESSAGE

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="App status")
async def root():
    """Always returns the same plaintext body. Time logs go to the server console."""
    return ROOT_MESSAGE

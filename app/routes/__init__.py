from fastapi import APIRouter

api_router = APIRouter()

# Import route modules here
from app.routes import email_parser

api_router.include_router(email_parser.router)

#!/usr/bin/env python3

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from bookrent.routes import api
from bookrent.configs import OPTIONS, CORS_ORIGINS
from bookrent import __version__ as VERSION

app = FastAPI(
    title="bookrent API",
    description="bookrent: reservations, rental fees and late returns for a lending library",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api.router, prefix="/v1/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bookrent.app:app", **OPTIONS)

#!/usr/bin/env python3
from bookrent.app import app
from bookrent.configs import HOST, PORT, LOG_LEVEL
import uvicorn

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL)

# backend/main.py
from __future__ import annotations

import logging
import os

import uvicorn

logging.basicConfig(level=logging.INFO)

if __name__ == "__main__":              # pragma: no cover
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=False,
    )

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import database
from admin_routes import auth_router, router as admin_router
from config import CORS_ORIGINS, LOG_LEVEL, PORT
from public_routes import router as public_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ==================
# FastAPI app config
# ==================
app = FastAPI(title="Portfolio API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(public_router)
app.include_router(auth_router)
app.include_router(admin_router)


# ======
# Routes
# ======
@app.get("/")
def root():
    return {"status": "ok", "service": "portfolio-api"}


@app.get("/test")
def test_database():
    ok = database.db is not None
    collections = []
    if ok:
        try:
            collections = database.db.list_collection_names()
        except Exception:
            logger.exception("Could not list collections")
            ok = False
    return {"backend": "running", "database": "connected" if ok else "not-available", "collections": collections[:10]}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)

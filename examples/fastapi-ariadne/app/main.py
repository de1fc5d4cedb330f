"""FastAPI + Ariadne + nodeql example."""

import logging
import os
from contextlib import asynccontextmanager

from ariadne import make_executable_schema
from ariadne.asgi import GraphQL
from fastapi import FastAPI

from app import database as db
from app.resolvers import resolvers
from app.schema import TYPE_DEFS

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

schema = make_executable_schema(TYPE_DEFS, *resolvers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("[STARTUP] Initializing SQLite database")
    await db.init_db()
    yield


app = FastAPI(
    title="nodeql Example API",
    description="GraphQL API with global object identification",
    version="1.0.0",
    lifespan=lifespan,
)

app.mount("/graphql", GraphQL(schema, debug=DEBUG))


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)

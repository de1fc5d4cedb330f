"""FastAPI + Strawberry + nodeql example."""

import logging
import os

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from app.schema import schema

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

app = FastAPI(
    title="nodeql Strawberry Example",
    description="GraphQL API with global object identification",
    version="1.0.0",
)

app.include_router(GraphQLRouter(schema), prefix="/graphql")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)

"""FastAPI application exposing the task store as a REST API."""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasktrack import __version__
from tasktrack.models import NotFoundError, Task, TaskCreate, TaskUpdate, ValidationError
from tasktrack.store import TaskStore

logger = logging.getLogger(__name__)


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        store: Task store to serve; a fresh empty one by default

    Returns:
        FastAPI application
    """
    if store is None:
        store = TaskStore()

    app = FastAPI(
        title="tasktrack",
        description="In-memory task CRUD API",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )
    app.state.store = store

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s malformed body", request.method, request.url.path)
        return JSONResponse(status_code=400, content={"message": "Malformed request body"})

    # Sync handlers run on the worker thread pool; TaskStore serializes access.

    @app.get("/api/tasks")
    def list_tasks() -> list[dict]:
        """Return every task in creation order."""
        return [task.to_wire() for task in store.list_all()]

    @app.post("/api/tasks", status_code=status.HTTP_201_CREATED)
    def create_task(body: TaskCreate, response: Response) -> dict:
        """Create a task; 400 when the description is blank."""
        task = store.create(body.description)
        response.headers["Location"] = f"/api/tasks/{task.id}"
        logger.info("created task %s", task.id)
        return task.to_wire()

    @app.put("/api/tasks/{task_id}")
    def update_task(task_id: str, body: TaskUpdate) -> dict:
        """Apply the supplied fields; 404 when the id is unknown."""
        task: Task = store.update(
            task_id,
            description=body.description,
            is_completed=body.is_completed,
        )
        logger.info("updated task %s", task_id)
        return task.to_wire()

    @app.delete("/api/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_task(task_id: str) -> Response:
        """Delete a task; 404 when the id is unknown."""
        store.delete(task_id)
        logger.info("deleted task %s", task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app

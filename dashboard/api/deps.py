# dashboard/api/deps.py

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.engine import Engine
from starlette.datastructures import FormData

from dashboard.cache import ViewCache
from dashboard.models.results import ActionResult, Redirect


def get_db(request: Request) -> Engine:
    return request.app.state.engine


def get_cache(request: Request) -> ViewCache:
    return request.app.state.cache


async def get_form(request: Request) -> FormData:
    return await request.form()


def action_response(result: ActionResult) -> Response:
    """
    Turn an action result into the HTTP reply for the submitting form.

    Field errors are the user's to fix (422); a state with only a summary
    message means the store failed (500).
    """
    if isinstance(result, Redirect):
        return RedirectResponse(result.location, status_code=303)

    status_code = 422 if result.errors else 500
    return JSONResponse(result.model_dump(), status_code=status_code)

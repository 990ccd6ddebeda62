# dashboard/api/auth.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.engine import Engine
from starlette.datastructures import FormData

from dashboard.api.deps import get_db, get_form
from dashboard.auth import CredentialsProvider, authenticate
from dashboard.config import DASHBOARD_PATH, LOGIN_PATH

router = APIRouter(tags=["auth"])


@router.post(LOGIN_PATH)
def login(
    request: Request,
    form: FormData = Depends(get_form),
    engine: Engine = Depends(get_db),
) -> Response:
    error = authenticate(form, sign_in=CredentialsProvider(engine, request.session))
    if error is not None:
        return JSONResponse({"message": error}, status_code=401)
    return RedirectResponse(DASHBOARD_PATH, status_code=303)


@router.post("/logout")
def logout(request: Request) -> Response:
    request.session.clear()
    return RedirectResponse(LOGIN_PATH, status_code=303)

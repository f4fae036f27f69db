# -*- coding: utf-8 -*-
"""FastAPI wiring for a storage instance.

The HTTP layer creates one store at startup and installs it on the app;
route handlers receive it through ``Depends(get_storage)``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .errors import InvalidInputError, NotFoundError
from .storage import Storage


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _invalid_input_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def install_storage(app: FastAPI, storage: Storage) -> None:
    app.state.storage = storage
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidInputError, _invalid_input_handler)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage

#!/usr/bin/env python3
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from api_models import ErrorResponse, ParseRequest, RemoteDocument, RemoteSetDocument
from helper import Environment
from lirc_config import ConfigReader, ConfigReadError
from remote_set import DocumentBuilder
from runtime_version import SOFTWARE_VERSION

env = Environment()
builder = DocumentBuilder()


def require_api_key(x_api_key: Optional[str]) -> None:
    if not env.api_key:
        return
    if not x_api_key or x_api_key != env.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def config_read_error_response(error: ConfigReadError) -> JSONResponse:
    if error.missing:
        payload = ErrorResponse(code="config_missing", message=error.message)
        return JSONResponse(status_code=404, content=payload.model_dump())
    payload = ErrorResponse(code="config_unreadable", message=error.message)
    return JSONResponse(status_code=500, content=payload.model_dump())


def pick(override: Optional[bool], default: bool) -> bool:
    return default if override is None else bool(override)


def read_configured_remotes() -> RemoteSetDocument:
    reader = ConfigReader(encoding=env.lirc_config_encoding, accept_lirc_code=env.accept_lirc_code)
    return reader.parse_config(
        env.lirc_config_path,
        builder,
        generate_parameters=env.generate_parameters,
        alternating_signs=env.alternating_signs,
    )


app = FastAPI(
    title="lirc-config",
    version=SOFTWARE_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)


@app.exception_handler(ConfigReadError)
async def config_read_error_handler(request: Request, exc: ConfigReadError) -> JSONResponse:
    return config_read_error_response(exc)


api = APIRouter(prefix="/api")


@api.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True}


@api.get("/status/config")
def status_config() -> Dict[str, Any]:
    return {
        "lirc_config_path": env.lirc_config_path,
        "lirc_config_encoding": env.lirc_config_encoding,
        "accept_lirc_code": env.accept_lirc_code,
        "generate_parameters": env.generate_parameters,
        "alternating_signs": env.alternating_signs,
        "max_upload_bytes": env.max_upload_bytes,
    }


# -----------------
# Remotes
# -----------------


@api.get(
    "/lirc/remotes",
    response_model=RemoteSetDocument,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_remotes() -> RemoteSetDocument:
    return read_configured_remotes()


@api.get(
    "/lirc/remotes/{name}",
    response_model=RemoteDocument,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_remote(name: str) -> Union[RemoteDocument, JSONResponse]:
    document = read_configured_remotes()
    for remote in document.remotes:
        if remote.name == name:
            return remote
    payload = ErrorResponse(code="remote_not_found", message=f"Unknown remote name: {name}")
    return JSONResponse(status_code=404, content=payload.model_dump())


@api.post(
    "/lirc/parse",
    response_model=RemoteSetDocument,
    responses={401: {"description": "Invalid API key"}, 413: {"description": "Config text too large"}},
)
def parse_config(body: ParseRequest, x_api_key: Optional[str] = Header(default=None)) -> RemoteSetDocument:
    require_api_key(x_api_key)

    if len(body.text.encode("utf-8")) > env.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Config text too large")

    reader = ConfigReader(
        encoding=env.lirc_config_encoding,
        accept_lirc_code=pick(body.accept_lirc_code, env.accept_lirc_code),
    )
    source = (body.source or "").strip() or "upload"
    remotes = reader.read_text(body.text, source=source)
    return builder.build(
        remotes,
        source=source,
        generate_parameters=pick(body.generate_parameters, env.generate_parameters),
        alternating_signs=pick(body.alternating_signs, env.alternating_signs),
    )


# Register API at /api
app.include_router(api)

# Optional: also register the same API under the public base url (so direct /base/api works without a proxy)
public_base_url = env.public_base_url  # always with trailing slash
base_prefix = public_base_url.rstrip("/")
if base_prefix:
    app.include_router(api, prefix=base_prefix)

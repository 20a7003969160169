from fastapi import FastAPI, Form, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from datetime import datetime, timezone
import logging
import platform
import sys
import time

import httpx
import psutil
import uvicorn

# Local imports
from errors import FixtureNotFoundError, MalformedFixtureError
from fixtures import read_fixture
from models import SignupResult
from page_controller import PageController
from settings import ASSETS_DIR, DATA_DIR, LOG_FORMAT, PORT, PUBLIC_DIR

log = logging.getLogger("content_server")


# FASTAPI APP

app = FastAPI(title="Haruko Imports")

# Static assets
app.mount("/assets", StaticFiles(directory=str(ASSETS_DIR)), name="assets")


# JSON FIXTURES

@app.get("/api/data/{filename}")
def get_data(filename: str):
    try:
        return read_fixture(filename)
    except FixtureNotFoundError:
        log.warning("File not found: %s", filename)
        return JSONResponse(status_code=404, content={"error": "File not found"})
    except MalformedFixtureError as e:
        log.error("Invalid JSON in %s: %s", filename, e.reason)
        return JSONResponse(status_code=500, content={"error": "Malformed JSON"})


# NEWSLETTER SIGN UP (nothing is stored)

@app.post("/api/signup")
async def signup(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    email = payload.get("email")

    if not name or not email:
        result = SignupResult(success=False, message="Name and email are required")
        return JSONResponse(status_code=400, content=result.model_dump())

    log.info("Signup received: %s <%s>", name, email)
    return SignupResult(success=True, message="Thank you for signing up to our newsletter!").model_dump()


# DEBUG ROUTES

@app.get("/api/debug/check-assets")
def check_assets():
    try:
        files = sorted(p.name for p in ASSETS_DIR.iterdir())
    except OSError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to read asset directory", "details": str(e)},
        )
    return {"success": True, "assetPath": str(ASSETS_DIR), "files": files}


@app.get("/api/debug/server-info")
def server_info():
    started = psutil.Process().create_time()
    return {
        "pythonVersion": platform.python_version(),
        "platform": sys.platform,
        "uptime": round(time.time() - started, 3),
        "serverTime": datetime.now(timezone.utc).isoformat(),
        "publicPath": str(PUBLIC_DIR),
        "dataPath": str(DATA_DIR),
    }


# SINGLE PAGE DOCUMENT

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


async def page_response(menu="", submenu="", truck_id=None, signup=None):
    # The page controller reads the fixtures back through this same app
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://content-server") as client:
        controller = PageController(client)
        if menu == "open":
            controller.toggle_sidebar(True)
        if submenu:
            controller.toggle_submenu(submenu, True)

        await controller.load()

        if truck_id is not None:
            controller.show_truck_details(truck_id)
        if signup is not None:
            await controller.submit_signup(*signup)
        return HTMLResponse(controller.render_document())


@app.get("/", response_class=HTMLResponse)
async def index(menu: str = "", submenu: str = ""):
    return await page_response(menu, submenu)


@app.get("/ktrucks/{truck_id}", response_class=HTMLResponse)
async def ktruck_detail(truck_id: str, menu: str = "", submenu: str = ""):
    return await page_response(menu, submenu, truck_id=truck_id)


@app.post("/newsletter", response_class=HTMLResponse)
async def newsletter(name: str = Form(""), email: str = Form(""), menu: str = "", submenu: str = ""):
    return await page_response(menu, submenu, signup=(name.strip(), email.strip()))


@app.api_route("/{full_path:path}", methods=FALLBACK_METHODS)
async def public_or_index(request: Request, full_path: str, menu: str = "", submenu: str = ""):
    # Files under public/ are served as-is, every other path gets the page
    if request.method in ("GET", "HEAD"):
        public_dir = PUBLIC_DIR.resolve()
        candidate = (public_dir / full_path).resolve()
        if public_dir in candidate.parents and candidate.is_file():
            return FileResponse(candidate)
    return await page_response(menu, submenu)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    log.info("Server running at: http://localhost:%d", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)

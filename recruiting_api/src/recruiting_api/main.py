# src/recruiting_api/main.py

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import uvicorn
from fastapi import APIRouter, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from . import auth_routes, home_routes, report_routes
from .auth_routes import UserDirectory
from .config import DEFAULT_JWT_SECRET_KEY, Settings, settings
from .report_routes import ReportSource
from .services import AutoScreeningService, JobMatchingScheduler, PeriodicService

# Mount order matters: "/api" is matched after the more specific prefixes.
ROUTE_MOUNTS = [
    ("/api/auth", "auth"),
    ("/api/applicant", "applicant"),
    ("/api/jobs", "jobs"),
    ("/api/hr", "hr"),
    ("/api/profile", "profile"),
    ("/api/screening", "screening"),
    ("/api/matching", "matching"),
    ("/api/notifications", "notifications"),
    ("/api/admin", "admin"),
    ("/api/admin/hr-approvals", "hr_approvals"),
    ("/api", "home"),
    ("/api/reports", "reports"),
]


def default_routers() -> Dict[str, APIRouter]:
    return {
        "auth": auth_routes.router,
        "home": home_routes.router,
        "reports": report_routes.router,
    }


def default_services(app_settings: Settings) -> List[PeriodicService]:
    return [
        JobMatchingScheduler(interval_minutes=app_settings.JOB_MATCHING_INTERVAL_MINUTES),
        AutoScreeningService(interval_minutes=app_settings.AUTO_SCREENING_INTERVAL_MINUTES),
    ]


def build_user_directory(app_settings: Settings) -> UserDirectory:
    directory = UserDirectory()
    if app_settings.ADMIN_EMAIL and app_settings.ADMIN_PASSWORD:
        directory.add_user(app_settings.ADMIN_EMAIL, app_settings.ADMIN_PASSWORD, name="Administrator", role="admin")
    return directory


def mount_frontend(app: FastAPI, build_dir: Path) -> None:
    """
    Serves the prebuilt frontend bundle and falls back to its index.html
    for any path no API route matched.
    """
    build_dir = Path(build_dir).resolve()
    index_path = build_dir / "index.html"
    static_dir = build_dir / "static"
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        candidate = (build_dir / full_path).resolve()
        if full_path and candidate.is_file() and build_dir in candidate.parents:
            return FileResponse(candidate)
        if not index_path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Frontend build not found.")
        return FileResponse(index_path)


def create_app(
        app_settings: Optional[Settings] = None,
        routers: Optional[Dict[str, APIRouter]] = None,
        services: Optional[Sequence[PeriodicService]] = None,
        report_source: Optional[ReportSource] = None,
        user_directory: Optional[UserDirectory] = None,
) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        print(f"Server started on port {app_settings.PORT}")
        if app_settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET_KEY:
            print("MAIN: WARNING: JWT_SECRET_KEY is the built-in default. Set it before deploying.")
        # A service that fails to initialize aborts startup.
        started = []
        try:
            for service in application.state.services:
                service.initialize()
                started.append(service)
                print(f"{service.name} initialized")
            yield
        finally:
            for service in reversed(started):
                service.shutdown()

    app = FastAPI(
        title="Online Recruiting API",
        description="REST backend for applicants, HR, jobs, screening, matching and reports.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    app.state.report_source = report_source or ReportSource()
    app.state.user_directory = user_directory or build_user_directory(app_settings)
    app.state.services = list(services) if services is not None else default_services(app_settings)

    mounted = default_routers()
    mounted.update(routers or {})
    for prefix, name in ROUTE_MOUNTS:
        router = mounted.get(name)
        if router is None:
            continue
        app.include_router(router, prefix=prefix, tags=[name])

    if app_settings.IS_PRODUCTION:
        mount_frontend(app, app_settings.BUILD_DIR)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()

# app/routers/resume.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from app.core.errors import error_body
from app.core.settings import ResumeSettings, get_resume_settings

log = logging.getLogger("uvicorn.error")
router = APIRouter(prefix="/api", tags=["resume"])

_APP_DIR = Path(__file__).resolve().parents[1]


def _candidates(settings: ResumeSettings) -> list[Path]:
    candidates: list[Path] = []
    if settings.resume_path:
        candidates.append(Path(settings.resume_path))
    cwd = Path.cwd()
    candidates += [
        _APP_DIR / "public" / "resume.pdf",
        _APP_DIR.parent / "public" / "resume.pdf",
        cwd / "server" / "public" / "resume.pdf",
        cwd / "public" / "resume.pdf",
    ]
    return candidates


def find_resume(settings: ResumeSettings) -> tuple[list[Path], Optional[Path]]:
    candidates = _candidates(settings)
    for candidate in candidates:
        if candidate.is_file():
            return candidates, candidate
    return candidates, None


def _ensure_readable(path: Path) -> None:
    with path.open("rb") as f:
        f.read(1)


@router.get("/resume")
def download_resume(settings: ResumeSettings = Depends(get_resume_settings)):
    tried, found = find_resume(settings)
    if found is None:
        log.error(f"[resume] file not found. Tried: {[str(p) for p in tried]}")
        return JSONResponse(status_code=404, content=error_body("Resume file not found"))

    try:
        _ensure_readable(found)
    except OSError:
        log.error(f"[resume] cannot read {found}", exc_info=True)
        return JSONResponse(status_code=500, content=error_body("Failed to download resume"))

    return FileResponse(found, media_type="application/pdf", filename=settings.resume_filename)

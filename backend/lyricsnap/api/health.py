from fastapi import APIRouter, Depends

from lyricsnap.config import AppSettings, get_settings

router = APIRouter()


@router.get("/", summary="Health probe")
async def health_probe(settings: AppSettings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "version": settings.version}


# Accept the no-trailing-slash variant to avoid 307 redirects
@router.get("", include_in_schema=False)
async def health_probe_no_slash(settings: AppSettings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "version": settings.version}

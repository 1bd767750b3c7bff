from fastapi import APIRouter, Depends

from lyricsnap.config import AppSettings, get_settings
from lyricsnap.models.common import ErrorResponse
from lyricsnap.models.selection import Excerpt, ExcerptRequest
from lyricsnap.services.selection import build_excerpt

router = APIRouter()


@router.post(
    "/excerpt",
    response_model=Excerpt,
    responses={400: {"model": ErrorResponse}},
    summary="Validate a line selection and return the lines to render as an image",
)
async def excerpt(payload: ExcerptRequest, settings: AppSettings = Depends(get_settings)) -> Excerpt:
    return build_excerpt(
        payload.lyrics,
        payload.indices,
        title=payload.title,
        artist=payload.artist,
        max_lines=settings.max_selected_lines,
    )

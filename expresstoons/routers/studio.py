"""Studio router for cartoon generation and image editing."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from loguru import logger

from expresstoons.models.request import InlineData
from expresstoons.models.response import ErrorResponse, ImageResult
from expresstoons.models.studio import CartoonRequest, ColorOption, EditRequest, StyleType
from expresstoons.services.composer import encode_image
from expresstoons.services.errors import (
    ImageEncodingError,
    NoImageGeneratedError,
    UNKNOWN_ERROR,
    UpstreamError,
)
from expresstoons.services.provider import GeminiImageProvider
from expresstoons.services.session import get_session
from expresstoons.services.studio import StudioService
from expresstoons.styles import OTHER_STYLE, STYLE_CATALOG, resolve_style_name


router = APIRouter(prefix="/api")


MISSING_CARTOON_INPUT = "Please provide a description and a style."
MISSING_EDIT_INPUT = "Please upload an image and provide an edit instruction."

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad Request"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
    502: {"model": ErrorResponse, "description": "Bad Gateway"},
}


async def get_studio() -> StudioService:
    session = await get_session()
    return StudioService(GeminiImageProvider(session))


def error_detail(status_code: int, message: str, status: str) -> dict:
    return {"error": {"code": status_code, "message": message, "status": status}}


def bad_request(message: str) -> HTTPException:
    return HTTPException(
        status_code=400, detail=error_detail(400, message, "INVALID_ARGUMENT")
    )


async def read_upload(upload: UploadFile) -> InlineData:
    """Read an uploaded file fully into memory and encode it."""
    content = await upload.read()
    return encode_image(content, upload.content_type or "application/octet-stream")


async def run_action(action, request) -> ImageResult:
    """Map studio failures to the error envelope. Nothing is retried."""
    try:
        return ImageResult(image=await action(request))

    except NoImageGeneratedError as e:
        logger.warning(f"No image in response ({e.context})")
        raise HTTPException(status_code=502, detail=error_detail(502, str(e), "NO_IMAGE"))
    except UpstreamError as e:
        logger.error(f"Upstream call failed: {e}")
        raise HTTPException(status_code=502, detail=error_detail(502, str(e), "UNAVAILABLE"))
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        raise HTTPException(
            status_code=500,
            detail=error_detail(500, str(e) or UNKNOWN_ERROR, "INTERNAL"),
        )


@router.get(
    "/styles",
    summary="List styles",
    description="Built-in magazines and cartoonists, plus the entry that enables a custom style.",
)
async def list_styles():
    """List the built-in style catalog."""
    return {**STYLE_CATALOG, "other": OTHER_STYLE}


@router.post(
    "/cartoons",
    response_model=ImageResult,
    responses=ERROR_RESPONSES,
    summary="Generate cartoon",
    description="Generate a single-panel cartoon in a magazine or cartoonist style.",
)
async def generate_cartoon(
    description: str = Form(default=""),
    style_type: StyleType = Form(default="magazine"),
    style: str = Form(default=""),
    custom_style: str = Form(default=""),
    signature: str = Form(default=""),
    color_option: ColorOption = Form(default="color"),
    character_image: UploadFile | None = File(default=None),
    studio: StudioService = Depends(get_studio),
) -> ImageResult:
    style_name = resolve_style_name(style, custom_style)
    if not description or not style_name:
        raise bad_request(MISSING_CARTOON_INPUT)

    character = None
    # Browsers send an empty part when no file was chosen
    if character_image is not None and character_image.filename:
        try:
            character = await read_upload(character_image)
        except ImageEncodingError as e:
            raise bad_request(str(e))

    request = CartoonRequest(
        description=description,
        style_type=style_type,
        style_name=style_name,
        signature=signature,
        color_option=color_option,
        character_image=character,
    )
    return await run_action(studio.generate_cartoon, request)


@router.post(
    "/edits",
    response_model=ImageResult,
    responses=ERROR_RESPONSES,
    summary="Edit image",
    description="Edit an uploaded image according to a free-text instruction.",
)
async def edit_image(
    image: UploadFile | None = File(default=None),
    instruction: str = Form(default=""),
    studio: StudioService = Depends(get_studio),
) -> ImageResult:
    if image is None or not image.filename or not instruction:
        raise bad_request(MISSING_EDIT_INPUT)

    try:
        source = await read_upload(image)
    except ImageEncodingError:
        raise bad_request(MISSING_EDIT_INPUT)

    return await run_action(studio.edit_image, EditRequest(image=source, instruction=instruction))

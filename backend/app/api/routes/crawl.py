"""llms.txt generation routes.

``POST /crawl`` streams progress as newline-delimited JSON and finishes with
one terminal line carrying either the result or the error message.
``GET /crawl`` runs the same pipeline without progress and returns the
document as plain text.
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse

from app.api.deps import Generators
from app.models import CrawlProgress, CrawlRequest
from app.services.generator import LlmsTxtGenerator

logger = logging.getLogger(__name__)

router = APIRouter()


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def _json_line(payload: dict) -> str:
    return json.dumps(payload) + "\n"


def _log_abandoned_result(task: asyncio.Task) -> None:
    """Retrieve the outcome of a run whose stream was closed early."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.warning(f"Generation failed after the client disconnected: {error}")
    else:
        logger.info("Generation finished after the client disconnected")


async def stream_generation(
    generator: LlmsTxtGenerator,
    url: str,
    full_version: bool,
) -> AsyncIterator[str]:
    """Run the pipeline and yield each progress event as a JSON line.

    Progress events are queued by the pipeline callback and drained here.
    Pipeline failures are converted to a terminal error line, never raised.
    The run is not cancelled if the consumer stops reading.
    """
    queue: asyncio.Queue[CrawlProgress | None] = asyncio.Queue()

    task = asyncio.create_task(
        generator.generate(url, full_version, on_progress=queue.put_nowait)
    )
    # Runs after every progress event has been queued
    task.add_done_callback(lambda _: queue.put_nowait(None))

    drained = False
    try:
        while True:
            event = await queue.get()
            if event is None:
                break
            yield event.to_line()
        drained = True
    finally:
        if not drained:
            task.add_done_callback(_log_abandoned_result)

    try:
        result = task.result()
    except Exception as e:
        yield _json_line({"status": "error", "error": str(e) or "Unknown error"})
        return

    yield _json_line(
        {"status": "complete", "result": result.model_dump(mode="json", by_alias=True)}
    )


@router.post("/crawl")
async def crawl_stream(request: Request, generators: Generators):
    """Generate llms.txt for a URL, streaming progress updates.

    Body: ``{"url": "...", "fullVersion": false}``.
    """
    try:
        raw = await request.body()
        data = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        logger.error(f"Invalid request body: {e}")
        return _error_response(
            str(e) or "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if not isinstance(data, dict) or not data.get("url"):
        return _error_response("URL is required", status.HTTP_400_BAD_REQUEST)

    try:
        crawl_request = CrawlRequest.model_validate(data)
        generator = generators()
    except Exception as e:
        logger.error(f"Could not start generation for {data.get('url')}: {e}")
        return _error_response(
            str(e) or "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return StreamingResponse(
        stream_generation(generator, crawl_request.url, crawl_request.full_version),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )


@router.get("/crawl")
async def crawl_direct(
    generators: Generators,
    url: str | None = None,
    full: str | None = None,
):
    """Generate llms.txt for a URL and return it as plain text.

    Only ``full=true`` selects llms-full.txt.
    """
    if not url:
        return _error_response("URL parameter is required", status.HTTP_400_BAD_REQUEST)

    full_version = full == "true"
    try:
        result = await generators().generate(url, full_version)
    except Exception as e:
        logger.error(f"Direct generation failed for {url}: {e}")
        return _error_response(
            str(e) or "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return PlainTextResponse(
        content=result.content,
        headers={"Cache-Control": "public, max-age=3600"},
    )

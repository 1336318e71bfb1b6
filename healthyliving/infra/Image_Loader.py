"""Remote image loading for recipe rows.

ImageLoader fetches one URL with httpx. ImageLoads keeps one asyncio task per
recipe key so that the page, however many times it asks, triggers a single
download per attempt, and so that removing a recipe can cancel its download.
"""
import asyncio
import logging
from typing import Callable, Dict, Optional

import httpx

from healthyliving.domain.exceptions import ImageLoadCancelled
from healthyliving.utilities.config import IMAGE_TIMEOUT_SECONDS
from healthyliving.utilities.constants import IMAGE_ERROR, IMAGE_LOADING, IMAGE_READY

logger = logging.getLogger(__name__)


class ImageResult:
    def __init__(self, content: bytes = b"", content_type: str = "", error: Optional[str] = None):
        self.content = content
        self.content_type = content_type
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(content: bytes, content_type: str) -> "ImageResult":
        return ImageResult(content=content, content_type=content_type)

    @staticmethod
    def failure(message: str) -> "ImageResult":
        return ImageResult(error=message)

    def __repr__(self) -> str:
        if self.ok:
            return f"ImageResult({self.content_type}, {len(self.content)} bytes)"
        return f"ImageResult(error={self.error!r})"


class ImageLoader:
    def __init__(self, timeout: float = IMAGE_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self._transport = transport

    async def load(self, url: str) -> ImageResult:
        """Download `url`; never raises for network or HTTP problems."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True,
                                         transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return ImageResult.failure(f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return ImageResult.failure(str(e) or e.__class__.__name__)

        content_type = response.headers.get("content-type", "").split(";")[0].strip()
        if not content_type.startswith("image/"):
            return ImageResult.failure(f"Unsupported content type: {content_type or 'unknown'}")
        return ImageResult.success(response.content, content_type)


class ImageLoads:
    def __init__(self, loader: ImageLoader,
                 on_error: Optional[Callable[[str, str], None]] = None):
        self._loader = loader
        self._on_error = on_error
        self._tasks: Dict[str, asyncio.Task] = {}
        self._states: Dict[str, str] = {}

    def state(self, key: str) -> str:
        return self._states.get(key, IMAGE_LOADING)

    async def fetch(self, key: str, url: str) -> ImageResult:
        '''
        Return the image for `key`, starting a load if none is usable.

        A finished successful load is reused. A failed or cancelled one is
        retried. Raises ImageLoadCancelled if cancel(key) runs while waiting.
        '''
        task = self._tasks.get(key)
        if (task is not None and task.done() and not task.cancelled()
                and task.exception() is None and task.result().ok):
            return task.result()
        if task is None or task.done():
            self._states[key] = IMAGE_LOADING
            task = asyncio.ensure_future(self._run(key, url))
            self._tasks[key] = task
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled():
                raise ImageLoadCancelled(key)
            raise

    async def _run(self, key: str, url: str) -> ImageResult:
        try:
            result = await self._loader.load(url)
        except Exception as e:
            logger.exception(f"Image loader crashed for {key!r} ({url})")
            result = ImageResult.failure(str(e) or e.__class__.__name__)
        if result.ok:
            self._states[key] = IMAGE_READY
        else:
            self._states[key] = IMAGE_ERROR
            logger.warning(f"Image load failed for {key!r} ({url}): {result.error}")
            if self._on_error is not None:
                self._on_error(key, result.error)
        return result

    def cancel(self, key: str):
        '''Cancel any in-flight load for `key` and forget its state.'''
        task = self._tasks.pop(key, None)
        self._states.pop(key, None)
        if task is not None and not task.done():
            task.cancel()
            logger.info(f"Image load cancelled for {key!r}")

    def __contains__(self, key: str) -> bool:
        return key in self._tasks

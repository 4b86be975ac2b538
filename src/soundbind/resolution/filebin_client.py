"""Filebin client for resolving sound ids into downloadable audio URLs.

Sounds are uploaded to a bin named after the sound's UUID. Looking the bin
up with an ``Accept: application/json`` header returns its manifest:

    {"files": [{"content-type": "audio/wav", "filename": "song.wav"}, ...]}

The first file of the accepted content type wins, and its URL is
``<base>/<id>/<filename>``.

Usage:
    from soundbind.resolution import ResolutionClient

    with ResolutionClient("https://filebin.net") as client:
        asset = client.resolve(sound_id)
        print(asset.url)

    # From an event loop
    asset = await client.resolve_async(sound_id)

Each call makes exactly one request. There is no retry and no caching;
a failure is final for that call.
"""

import logging
from typing import Any, Optional
from uuid import UUID

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.config import SoundBindConfig
from ..core.errors import MalformedResponseError, NoAudioAssetError, UpstreamError
from ..core.sound import ResolvedAsset

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "audio/wav"


class ManifestFile(BaseModel):
    """One entry of a bin's ``files`` array."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    content_type: Optional[str] = Field(default=None, alias="content-type")
    filename: Optional[str] = None


class ResolutionClient:
    """Looks up uploaded sounds on a Filebin-compatible host."""

    def __init__(
        self,
        base_url: str,
        accepted_content_type: str = DEFAULT_CONTENT_TYPE,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the resolution client.

        Args:
            base_url: Filebin endpoint; a trailing slash is added if missing
            accepted_content_type: Content type an uploaded file must have
            client: httpx client to use for resolve(). Created (and owned) if None.
            async_client: httpx async client for resolve_async(). A short-lived
                one is created per call if None.
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.accepted_content_type = accepted_content_type
        self._client = client
        self._owns_client = client is None
        self._async_client = async_client

    @classmethod
    def from_config(cls, config: SoundBindConfig, **kwargs) -> "ResolutionClient":
        return cls(
            base_url=config.filebin_url,
            accepted_content_type=config.accepted_content_type,
            **kwargs,
        )

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client()
        return self._client

    def close(self):
        """Close the owned httpx client."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "ResolutionClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def bin_url(self, sound_id: UUID) -> str:
        """URL of the bin holding a sound's uploads."""
        return f"{self.base_url}{sound_id}"

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def resolve(self, sound_id: UUID) -> ResolvedAsset:
        """Find the audio file uploaded for a sound.

        Raises:
            UpstreamError: The host answered with a status other than 200
            MalformedResponseError: The manifest is not the expected JSON shape
            NoAudioAssetError: No file has the accepted content type
            httpx.HTTPError: The request itself failed
        """
        url = self.bin_url(sound_id)
        logger.debug(f"Resolving sound {sound_id} via {url}")

        response = self._get_client().get(url, headers={"Accept": "application/json"})
        return self._parse_response(sound_id, url, response)

    async def resolve_async(self, sound_id: UUID) -> ResolvedAsset:
        """Same as resolve(), without blocking the event loop."""
        url = self.bin_url(sound_id)
        logger.debug(f"Resolving sound {sound_id} via {url} (async)")

        if self._async_client is not None:
            response = await self._async_client.get(url, headers={"Accept": "application/json"})
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        return self._parse_response(sound_id, url, response)

    def _parse_response(self, sound_id: UUID, url: str, response: httpx.Response) -> ResolvedAsset:
        if response.status_code != 200:
            logger.error(f"Filebin error: {url} responded with status {response.status_code}")
            raise UpstreamError(url, response.status_code)

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Filebin returned a non-JSON body for {url}")
            raise MalformedResponseError(url, "body is not JSON") from None

        filename = self._find_audio_file(url, data)
        asset = ResolvedAsset(
            sound_id=sound_id,
            url=f"{url}/{filename}",
            content_type=self.accepted_content_type,
        )
        logger.info(f"Resolved sound {sound_id} to {asset.url}")
        return asset

    def _find_audio_file(self, url: str, data: Any) -> str:
        """Filename of the first accepted file in a manifest."""
        if not isinstance(data, dict):
            raise MalformedResponseError(url, "top-level value is not an object")
        if "files" not in data:
            raise MalformedResponseError(url, "no files uploaded")
        files = data["files"]
        if not isinstance(files, list):
            raise MalformedResponseError(url, "files is not an array")

        for index, element in enumerate(files):
            if not isinstance(element, dict):
                continue
            # Entries of other types are never inspected further
            if element.get("content-type") != self.accepted_content_type:
                continue
            try:
                entry = ManifestFile.model_validate(element)
            except ValidationError as e:
                raise MalformedResponseError(url, f"invalid file entry {index}: {e}") from None
            if not entry.filename:
                raise MalformedResponseError(url, f"file entry {index} has no filename")
            return entry.filename

        logger.error(f"No {self.accepted_content_type} files uploaded to {url}")
        raise NoAudioAssetError(url, self.accepted_content_type)

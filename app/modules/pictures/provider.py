import logging
import random
from typing import Any, Dict, List, NamedTuple, Optional

import httpx
from fastapi import Request

from app.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

PICSUM_BASE_URL = "https://picsum.photos"
# ids 1..1000 cover the Picsum catalog; the few gaps simply 404 into the fallback
CATALOG_SIZE = 1000
DEFAULT_SIZE = 400
MAX_OPTIONS = 30
OPTION_SIZES = {"thumb": 100, "small": 200, "regular": DEFAULT_SIZE}


class PictureChoice(NamedTuple):
    url: str
    used_fallback: bool


class ProfilePictureProvider:
    """Assigns profile pictures from Lorem Picsum.

    fetch_profile_picture() never raises: any failure of the metadata lookup
    falls back to a seeded placeholder URL that needs no network call.
    """

    def __init__(self, http: httpx.Client, rng: Optional[random.Random] = None):
        self.http = http
        self.rng = rng or random.Random()

    def fetch_profile_picture(self) -> PictureChoice:
        image_id = self.rng.randint(1, CATALOG_SIZE)
        try:
            return PictureChoice(self._lookup_download_url(image_id), False)
        except ExternalServiceError as e:
            fallback = self.placeholder_url()
            logger.warning(f"Picture lookup for id {image_id} failed ({e.message}); using {fallback}")
            return PictureChoice(fallback, True)
        except Exception as e:
            fallback = self.placeholder_url()
            logger.warning(f"Unexpected error looking up picture {image_id} ({e!r}); using {fallback}")
            return PictureChoice(fallback, True)

    def _lookup_download_url(self, image_id: int) -> str:
        try:
            response = self.http.get(f"{PICSUM_BASE_URL}/id/{image_id}/info")
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"request failed: {e}") from e
        except ValueError as e:
            raise ExternalServiceError("response is not JSON") from e

        url = payload.get("download_url") if isinstance(payload, dict) else None
        if not isinstance(url, str) or not url:
            raise ExternalServiceError("response has no download_url")
        return url

    def new_seed(self) -> str:
        return f"{self.rng.getrandbits(48):012x}"

    def placeholder_url(self, seed: Optional[str] = None, size: int = DEFAULT_SIZE) -> str:
        seed = seed or self.new_seed()
        return f"{PICSUM_BASE_URL}/seed/{seed}/{size}/{size}"

    def picture_options(self, count: int) -> List[Dict[str, Any]]:
        """Placeholder option sets for a picture picker; count is clamped to 0..MAX_OPTIONS."""
        count = max(0, min(count, MAX_OPTIONS))
        options = []
        for _ in range(count):
            seed = self.new_seed()
            options.append({
                "id": seed,
                "urls": {name: self.placeholder_url(seed, size) for name, size in OPTION_SIZES.items()},
            })
        return options


def create_http_client(timeout_seconds: float) -> httpx.Client:
    return httpx.Client(timeout=httpx.Timeout(timeout_seconds), follow_redirects=True)


def get_picture_provider(request: Request) -> ProfilePictureProvider:
    return request.app.state.picture_provider

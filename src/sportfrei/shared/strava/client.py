"""Strava API v3 client."""

import logging
from types import TracebackType
from typing import Any, cast

import httpx

from ..config import StravaSettings
from ..models import Activity, Athlete, AthleteStats

logger = logging.getLogger(__name__)

PERMISSION_HINT = (
    "This usually means your token lacks activity read permissions. "
    "Re-authorize the application with the 'activity:read_all' scope "
    "and update STRAVA_REFRESH_TOKEN."
)


class StravaAPIError(Exception):
    """Raised when the Strava API answers with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Strava API error {status_code}: {message}")


class StravaAPIClient:
    """
    Client for the Strava API.

    Exchanges the configured refresh token for an access token on first use
    and caches it for the lifetime of the client.

    Example:
        ```python
        with StravaAPIClient(get_strava_settings()) as client:
            athlete = client.get_athlete()
            activities = client.get_all_activities(max_pages=3)
        ```
    """

    def __init__(
        self,
        settings: StravaSettings,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Credentials and endpoints
            http_client: Optional pre-built httpx client (used by tests)
        """
        self.settings = settings
        self._http = http_client or httpx.Client(timeout=settings.timeout)
        self._access_token: str | None = None

    def __enter__(self) -> "StravaAPIClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def refresh_access_token(self) -> str:
        """
        Exchange the refresh token for a fresh access token.

        Returns:
            Access token

        Raises:
            StravaAPIError: If the token endpoint rejects the request
        """
        logger.debug("Refreshing Strava access token")
        response = self._http.post(
            self.settings.token_url,
            data={
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret,
                "refresh_token": self.settings.refresh_token,
                "grant_type": "refresh_token",
            },
        )
        self._raise_for_status(response)

        payload = cast(dict[str, Any], response.json())
        token: str = payload["access_token"]
        self._access_token = token
        logger.info("Obtained Strava access token")
        return token

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        token = self._access_token or self.refresh_access_token()
        url = f"{self.settings.api_url}/{path.lstrip('/')}"

        logger.debug(f"GET {url} params={params}")
        response = self._http.get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        self._raise_for_status(response)
        return response.json()

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return

        text = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get("message", text) if isinstance(body, dict) else text

        if response.status_code in (401, 403) and (
            "activity:read_permission" in text or "missing" in text
        ):
            message = f"{message}. {PERMISSION_HINT}"

        logger.error(f"Strava request failed ({response.status_code}): {message}")
        raise StravaAPIError(response.status_code, message)

    def get_athlete(self) -> Athlete:
        """Get the authenticated athlete's profile."""
        return Athlete.model_validate(self._get("athlete"))

    def get_athlete_stats(self, athlete_id: int) -> AthleteStats:
        """Get summary statistics for an athlete."""
        return AthleteStats.model_validate(self._get(f"athletes/{athlete_id}/stats"))

    def get_activities(self, page: int = 1, per_page: int = 30) -> list[Activity]:
        """
        Get one page of the athlete's activities, newest first.

        Args:
            page: 1-based page number
            per_page: Page size (Strava caps this at 200)

        Returns:
            Parsed activities for the page (empty past the last page)
        """
        data = self._get("athlete/activities", params={"page": page, "per_page": per_page})
        return [Activity.model_validate(item) for item in data]

    def get_all_activities(self, max_pages: int = 5, per_page: int = 30) -> list[Activity]:
        """
        Page through activities until a short page or ``max_pages`` is reached.

        Args:
            max_pages: Upper bound on requests
            per_page: Page size

        Returns:
            All activities fetched, in API order
        """
        activities: list[Activity] = []

        for page in range(1, max_pages + 1):
            batch = self.get_activities(page=page, per_page=per_page)
            activities.extend(batch)
            logger.debug(f"Page {page}: {len(batch)} activities")

            if len(batch) < per_page:
                break

        logger.info(f"Fetched {len(activities)} activities")
        return activities

    def get_activity(self, activity_id: int) -> Activity:
        """Get a single activity by ID."""
        return Activity.model_validate(self._get(f"activities/{activity_id}"))

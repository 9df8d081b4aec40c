"""Typed client for the portfolio REST API."""

import logging
from typing import Any

import httpx

from portfolio.schemas import (
    ContactAcknowledgement,
    ContactSubmission,
    FieldIssue,
    ProjectRecord,
    SkillRecord,
    parse_payload,
)

logger = logging.getLogger(__name__)

# Filter value the site's project filter bar uses for "everything"
ALL_CATEGORIES = "all"


class PortfolioAPIError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str, errors: list[FieldIssue] | None = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


class PortfolioClient:
    """Client used by the site to read projects and skills and send messages.

    Pass either a base URL or a ready ``httpx.Client`` (for example a
    FastAPI ``TestClient``).
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        if http_client is None:
            if base_url is None:
                raise ValueError("Either base_url or http_client is required")
            http_client = httpx.Client(base_url=base_url, timeout=timeout)
        self.http = http_client

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PortfolioClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling portfolio API: {e}")
            raise

        if response.is_error:
            raise _api_error(response)
        return response

    def list_projects(
        self, featured: bool = False, category: str | None = None
    ) -> list[ProjectRecord]:
        """Get projects in display order, optionally filtered."""
        params = {}
        if featured:
            params["featured"] = "true"
        if category and category != ALL_CATEGORIES:
            params["category"] = category

        response = self._request("GET", "/api/projects", params=params)
        return [ProjectRecord.model_validate(item) for item in response.json()]

    def get_project(self, project_id: int) -> ProjectRecord | None:
        """Get one project, or None if it does not exist."""
        try:
            response = self._request("GET", f"/api/projects/{project_id}")
        except PortfolioAPIError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                return None
            raise
        return ProjectRecord.model_validate(response.json())

    def list_skills(self, category: str | None = None) -> list[SkillRecord]:
        """Get skills in display order, optionally for one category."""
        params = {"category": category} if category else {}
        response = self._request("GET", "/api/skills", params=params)
        return [SkillRecord.model_validate(item) for item in response.json()]

    def send_message(
        self, name: str, email: str, subject: str, message: str
    ) -> ContactAcknowledgement:
        """Submit the contact form.

        The form is checked locally first, so an invalid email raises
        SchemaValidationError without a request being made.
        """
        submission = parse_payload(
            ContactSubmission,
            {"name": name, "email": email, "subject": subject, "message": message},
            "Invalid message data",
        )
        response = self._request("POST", "/api/contact", json=submission.model_dump(by_alias=True))
        return ContactAcknowledgement.model_validate(response.json())


def _api_error(response: httpx.Response) -> PortfolioAPIError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    errors = [FieldIssue.model_validate(error) for error in body.get("errors", [])]
    return PortfolioAPIError(
        response.status_code,
        body.get("message") or response.reason_phrase,
        errors,
    )

# app/services/messages_client.py

from typing import Any, Dict, List, Optional

import requests

from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger("client")


class MessagesAPIError(Exception):
    """Raised for any response from the message API that is not a 2xx."""

    def __init__(self, response: requests.Response):
        self.response = response
        self.status_code = response.status_code
        self.detail = _error_detail(response)
        super().__init__(f"{self.status_code}: {self.detail}")


def _error_detail(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason or "Unknown error"

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("detail"):
            return str(error["detail"])
        if payload.get("detail"):
            return str(payload["detail"])
    return response.text


class MessagesClient:
    """
    Talks to the /messages API over HTTP.

    Every call checks ``response.ok`` and raises MessagesAPIError with the
    response attached when the server reports a failure. Network errors from
    requests are not wrapped.
    """

    HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self._owns_session = session is None
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        response = self.session.request(
            method, url, headers=self.HEADERS, timeout=self.timeout, **kwargs
        )
        if not response.ok:
            logger.warning("%s %s failed with %s", method, url, response.status_code)
            raise MessagesAPIError(response)
        if not response.content:
            return None
        return response.json()

    def fetch_messages(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        username: Optional[str] = None,
        sort_order: str = "desc",
    ) -> List[Dict[str, Any]]:
        params = {"page": page, "sort_order": sort_order}
        if page_size is not None:
            params["page_size"] = page_size
        if username:
            params["username"] = username
        payload = self._request("GET", "/messages", params=params)
        return payload["data"]["messages"]

    def fetch_message(self, message_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/messages/{message_id}")

    def post_message(self, username: str, body: str) -> Dict[str, Any]:
        return self._request("POST", "/messages", json={"username": username, "body": body})

    def submit_form(self, username: str, body: str) -> Dict[str, Any]:
        """Send the message the way a browser <form> would (urlencoded)."""
        return self._request("POST", "/messages/form", data={"username": username, "body": body})

    def delete_message(self, message_id: str) -> None:
        self._request("DELETE", f"/messages/{message_id}")

    def post_and_refresh(self, username: str, body: str) -> List[Dict[str, Any]]:
        """Post a message, then fetch the first page so it includes the new one."""
        created = self.post_message(username, body)
        logger.info("Posted message %s, refreshing list", created.get("id"))
        return self.fetch_messages()

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class MessageForm:
    """
    Holds the state of a "new message" form between edits and submission.

    ``values`` are the current field contents, ``errors`` maps a field (or
    "form" for server failures) to a message, and ``submitting`` is True only
    while a request is in flight.
    """

    FIELDS = ("username", "body")

    def __init__(
        self,
        max_username_length: Optional[int] = None,
        max_body_length: Optional[int] = None,
    ):
        self.max_lengths = {
            "username": max_username_length or settings.MAX_USERNAME_LENGTH,
            "body": max_body_length or settings.MAX_BODY_LENGTH,
        }
        self.values = {field: "" for field in self.FIELDS}
        self.errors: Dict[str, str] = {}
        self.submitting = False

    def set_value(self, field: str, value: str):
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value
        self.errors.pop(field, None)

    def validate(self) -> Dict[str, str]:
        errors = {}
        for field in self.FIELDS:
            value = self.values[field].strip()
            if not value:
                errors[field] = f"{field} is required"
            elif len(value) > self.max_lengths[field]:
                errors[field] = f"{field} must be at most {self.max_lengths[field]} characters"
        self.errors = errors
        return errors

    def reset(self, keep_username: bool = True):
        username = self.values["username"] if keep_username else ""
        self.values = {"username": username, "body": ""}
        self.errors = {}

    def submit(self, client: MessagesClient) -> Optional[Dict[str, Any]]:
        if self.validate():
            return None

        self.submitting = True
        try:
            created = client.post_message(self.values["username"].strip(), self.values["body"].strip())
        except MessagesAPIError as e:
            self.errors["form"] = e.detail
            raise
        finally:
            self.submitting = False

        self.reset()
        return created

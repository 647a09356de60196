# hoshizora/client/api.py
"""HTTP client for the blog's JSON CRUD API."""

from typing import Any

import httpx

DEFAULT_ERROR_MESSAGE = 'เกิดข้อผิดพลาดในการเชื่อมต่อกับเซิร์ฟเวอร์'


class ApiError(Exception):
    """
    Raised for any failed API call: an HTTP error status, a transport failure
    or a response body that is not JSON. ``code`` carries the server's error
    kind (e.g. ``slug_conflict``) when it sent one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        fields: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.fields = fields or {}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}
        message = data.get('error') or data.get('message') or f'HTTP {response.status_code}'
        return cls(
            message,
            status_code=response.status_code,
            code=data.get('code'),
            fields=data.get('fields'),
        )


class ApiClient:
    """Call-and-get-JSON client. Every failure surfaces as ApiError."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers=self._get_headers(),
            transport=transport,
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_headers(self) -> dict[str, str]:
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def request(self, path: str, method: str = 'GET', json: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise ApiError(f'{DEFAULT_ERROR_MESSAGE}: {e}') from e

        if response.is_error:
            raise ApiError.from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError('Invalid JSON in response', status_code=response.status_code) from e

    def get(self, path: str) -> Any:
        return self.request(path)

    def post(self, path: str, json: Any) -> Any:
        return self.request(path, method='POST', json=json)

    def put(self, path: str, json: Any) -> Any:
        return self.request(path, method='PUT', json=json)

    def delete(self, path: str) -> Any:
        return self.request(path, method='DELETE')


def create_api_client(base_url: str, token: str | None = None) -> ApiClient:
    """Factory function to create an ApiClient."""
    return ApiClient(base_url=base_url, token=token)

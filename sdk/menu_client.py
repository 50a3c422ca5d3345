# sdk/menu_client.py
from typing import Any, Dict, List, Optional

import httpx
import requests


class MenuClient:
    def __init__(self, base_url: str = "http://localhost:3000", timeout: int = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def status(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        r.raise_for_status()
        return r.text

    def reset(self) -> Dict[str, Any]:
        r = self.session.post(self._url("/reset"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Menu
    def list_items(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/menu"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        r = self.session.get(self._url(f"/api/menu/{item_id}"), timeout=self.timeout)
        # a missing item is an answer, not an error
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def create_item(self, name: str, description: str, price: float, category: str,
                    ingredients: List[str], available: Optional[bool] = None) -> Dict[str, Any]:
        payload = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "ingredients": ingredients,
        }
        if available is not None:
            payload["available"] = available
        r = self.session.post(self._url("/api/menu"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_item(self, item_id: int, **fields: Any) -> Dict[str, Any]:
        r = self.session.put(self._url(f"/api/menu/{item_id}"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        r = self.session.delete(self._url(f"/api/menu/{item_id}"), timeout=self.timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    # Async listing (example)
    async def list_items_async(self) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(self._url("/api/menu"))
            r.raise_for_status()
            return r.json()


def validation_errors(exc: requests.HTTPError) -> List[Dict[str, str]]:
    """Pull the field errors out of a 400 answer, or [] when there are none."""
    if exc.response is None or exc.response.status_code != 400:
        return []
    try:
        return exc.response.json().get("errors", [])
    except ValueError:
        return []

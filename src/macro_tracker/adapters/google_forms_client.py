"""Google Forms API client for the food item dropdown."""

from dataclasses import dataclass

import httpx

from macro_tracker.services.forms import FormClient

FORMS_BASE_URL = "https://forms.googleapis.com/v1"


@dataclass
class HttpxGoogleFormsClient(FormClient):
    """Replaces the options of a dropdown question via batchUpdate."""

    form_id: str
    item_id: str
    access_token: str
    http_client: httpx.AsyncClient
    base_url: str = FORMS_BASE_URL

    @classmethod
    def create(
        cls, form_id: str, item_id: str, access_token: str
    ) -> "HttpxGoogleFormsClient":
        """Create a forms client with a managed httpx session."""
        return cls(
            form_id=form_id,
            item_id=item_id,
            access_token=access_token,
            http_client=httpx.AsyncClient(),
        )

    async def set_choices(self, choices: list[str]) -> None:
        """Replace the dropdown options with the given choices."""
        headers = {"Authorization": f"Bearer {self.access_token}"}
        form_url = f"{self.base_url}/forms/{self.form_id}"
        form_response = await self.http_client.get(
            form_url, headers=headers, timeout=10
        )
        form_response.raise_for_status()
        index, item = _find_item(form_response.json(), self.item_id)
        item["questionItem"]["question"]["choiceQuestion"] = {
            "type": "DROP_DOWN",
            "options": [{"value": choice} for choice in choices],
        }
        payload = {
            "requests": [
                {
                    "updateItem": {
                        "item": item,
                        "location": {"index": index},
                        "updateMask": "questionItem.question.choiceQuestion",
                    }
                }
            ]
        }
        response = await self.http_client.post(
            f"{form_url}:batchUpdate", headers=headers, json=payload, timeout=10
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def _find_item(form: dict[str, object], item_id: str) -> tuple[int, dict]:
    for index, item in enumerate(form.get("items", [])):
        if item.get("itemId") == item_id and "questionItem" in item:
            return index, item
    raise RuntimeError(f"Form item {item_id} not found")

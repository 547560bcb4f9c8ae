"""Transactional email API client."""

from dataclasses import dataclass

import httpx

from macro_tracker.services.notifications import EmailClient


@dataclass
class HttpxEmailClient(EmailClient):
    """Email client posting to a Resend-compatible HTTP API."""

    api_key: str
    sender: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, sender: str, base_url: str) -> "HttpxEmailClient":
        """Create an email client with a managed httpx session."""
        return cls(
            api_key=api_key,
            sender=sender,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def send_email(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text email."""
        response = await self.http_client.post(
            f"{self.base_url}/emails",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={"from": self.sender, "to": [to], "subject": subject, "text": body},
            timeout=10,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

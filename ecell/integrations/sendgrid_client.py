# ecell/integrations/sendgrid_client.py
from __future__ import annotations

import html
import logging
from datetime import datetime
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class ContactNotifier:
    """Avisa a equipe por e-mail a cada mensagem do formulário de contato.

    Melhor esforço: sem API key/remetente não faz nada, e falhas só vão pro log.
    """

    def __init__(
        self,
        api_key: Optional[str],
        from_email: Optional[str],
        to_email: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.to_email = to_email
        self._timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.api_key and self.from_email)

    def build_payload(self, *, name: str, email: str, message: str, submitted_at: datetime) -> Dict[str, Any]:
        body = (
            "<h2>New Contact Form Submission</h2>"
            f"<p><strong>Name:</strong> {html.escape(name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(email)}</p>"
            "<p><strong>Message:</strong></p>"
            f"<p>{html.escape(message)}</p>"
            f"<p><em>Submitted at: {submitted_at:%Y-%m-%d %H:%M:%S %Z}</em></p>"
        )
        return {
            "personalizations": [{"to": [{"email": self.to_email}]}],
            "from": {"email": self.from_email},
            "subject": f"New Contact Form Submission - {name}",
            "content": [{"type": "text/html", "value": body}],
        }

    async def send_contact_notification(self, *, name: str, email: str, message: str, submitted_at: datetime) -> bool:
        if not self.enabled:
            return False
        payload = self.build_payload(name=name, email=email, message=message, submitted_at=submitted_at)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                r = await client.post(
                    SENDGRID_SEND_URL,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
            r.raise_for_status()
        except httpx.HTTPError as exc:
            # não derruba o envio do formulário
            logger.warning("Contact notification email failed: %r", exc)
            return False
        return True

"""
Messaging view with background polling.

mount() fetches once and starts a daemon thread that re-fetches every
`poll_seconds` (VAHUB_MESSAGE_POLL_SECONDS, default 5) until unmount().
Conversations are derived client-side from the flat message list.
"""
import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from vahub.client.api import ApiError, VAHubClient
from vahub.client.views import View
from vahub.core.config import get_settings

logger = logging.getLogger(__name__)


class MessagingView(View):

    def __init__(self, api: VAHubClient, user: Dict[str, Any],
                 poll_seconds: Optional[float] = None, active_chat: Optional[str] = None):
        super().__init__(api, user)
        if poll_seconds is None:
            poll_seconds = get_settings().message_poll_seconds
        self.poll_seconds = poll_seconds
        self.active_chat = active_chat
        self.messages: List[dict] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def refresh(self):
        messages = self._call(self.api.get_messages, self.user["id"])
        if messages is not None:
            with self._lock:
                self.messages = messages

    def mount(self):
        if self.is_polling:
            return
        super().mount()
        self._stop.clear()
        self._thread = threading.Thread(target=self._poll, name="message-poller", daemon=True)
        self._thread.start()

    def unmount(self):
        """Stop polling. No fetch is issued after this returns."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    @property
    def is_polling(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _poll(self):
        while not self._stop.wait(self.poll_seconds):
            try:
                self.refresh()
            except requests.RequestException:
                logger.exception("Message poll failed")

    @property
    def conversations(self) -> List[str]:
        """Distinct other-party ids, in the order they first appear."""
        me = self.user["id"]
        seen: List[str] = []
        with self._lock:
            for m in self.messages:
                other = m["receiver_id"] if m["sender_id"] == me else m["sender_id"]
                if other not in seen:
                    seen.append(other)
        return seen

    @property
    def active_messages(self) -> List[dict]:
        me, other = self.user["id"], self.active_chat
        with self._lock:
            return [
                m for m in self.messages
                if (m["sender_id"] == me and m["receiver_id"] == other)
                or (m["sender_id"] == other and m["receiver_id"] == me)
            ]

    def open_chat(self, user_id: str):
        self.active_chat = user_id

    def send(self, message_body: str) -> Optional[str]:
        """Send to the active chat and re-fetch. Empty text or no active chat does nothing."""
        if not self.active_chat or not message_body:
            return None
        try:
            message_id = self.api.send_message(self.user["id"], self.active_chat, message_body)
        except ApiError as e:
            self.error = e.message
            return None
        self.refresh()
        return message_id

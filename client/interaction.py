"""Client-side state for the email writer: submit, render, copy.

EmailComposer owns one InteractionState at a time and, independently, a
CopyState for the "copy output" affordance. Only one generate request can be
in flight per composer.

Usage::

    async with EmailComposer() as composer:
        composer.email_content = "Hi, can we reschedule?"
        composer.tone = Tone.CASUAL
        await composer.submit()
        if composer.generated_email:
            composer.copy()
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

import httpx

from config import ClientConfig
from models import Tone

from .clipboard import ClipboardError, copy_to_clipboard

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = (
    "Failed to generate email. Please check your network and ensure the local API is running."
)
COPY_RESET_DELAY = 2.5  # seconds


class ValidationError(Exception):
    """Submit was attempted while it is disabled."""


# ── Interaction state ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Error:
    message: str


InteractionState = Union[Idle, Loading, Success, Error]


class CopyState(str, Enum):
    IDLE = "idle"
    COPIED = "copied"


# ── Composer ───────────────────────────────────────────────────────────────────


class EmailComposer:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clipboard: Callable[[str], None] = copy_to_clipboard,
        copy_reset_delay: float = COPY_RESET_DELAY,
    ) -> None:
        self.config = config or ClientConfig()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.config.timeout)
        self._clipboard = clipboard
        self._copy_reset_delay = copy_reset_delay
        self._reset_handle: Optional[asyncio.TimerHandle] = None

        self.email_content = ""
        self.tone: Union[Tone, str] = Tone.FORMAL
        self.state: InteractionState = Idle()
        self.copy_state = CopyState.IDLE

    # -- rendering helpers --

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def can_submit(self) -> bool:
        return bool(self.email_content) and not self.is_loading

    @property
    def generated_email(self) -> str:
        return self.state.text if isinstance(self.state, Success) else ""

    @property
    def error(self) -> str:
        return self.state.message if isinstance(self.state, Error) else ""

    @property
    def button_label(self) -> str:
        return "Generating..." if self.is_loading else "Generate Email"

    @property
    def copy_label(self) -> str:
        return "Copied!" if self.copy_state is CopyState.COPIED else "Copy Output"

    # -- generate --

    async def submit(self) -> InteractionState:
        """Send the current email and tone; return the resulting state.

        Raises:
            ValidationError: if the email is empty or a request is in flight.
        """
        if not self.email_content:
            raise ValidationError("Email content is empty.")
        if self.is_loading:
            raise ValidationError("A reply is already being generated.")

        self.state = Loading()
        result: InteractionState = Error(GENERATION_FAILED_MESSAGE)
        try:
            result = await self._request_reply()
        finally:
            self.state = result
        return self.state

    async def _request_reply(self) -> InteractionState:
        tone = self.tone.value if isinstance(self.tone, Tone) else self.tone
        try:
            response = await self._http.post(
                self.config.api_url,
                json={"emailContent": self.email_content, "tone": tone},
            )
        except httpx.HTTPError as e:
            logger.warning("Failed to generate email: %r", e)
            return Error(GENERATION_FAILED_MESSAGE)

        if not response.is_success:
            logger.warning("Failed to generate email: %s", _describe_failure(response))
            return Error(GENERATION_FAILED_MESSAGE)

        # server already extracted plain text
        return Success(response.text)

    # -- copy --

    def copy(self) -> bool:
        """Copy the generated reply. Must be called from a running event loop."""
        if not isinstance(self.state, Success):
            return False
        loop = asyncio.get_running_loop()
        try:
            self._clipboard(self.state.text)
        except ClipboardError as e:
            logger.error("Failed to copy text: %s", e)
            self._cancel_reset()
            self.copy_state = CopyState.IDLE
            return False

        self._cancel_reset()
        self.copy_state = CopyState.COPIED
        self._reset_handle = loop.call_later(self._copy_reset_delay, self._reset_copy_state)
        return True

    def _reset_copy_state(self) -> None:
        self._reset_handle = None
        self.copy_state = CopyState.IDLE

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    # -- lifecycle --

    async def close(self) -> None:
        self._cancel_reset()
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "EmailComposer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def _describe_failure(response: httpx.Response) -> str:
    status = f"HTTP error! Status: {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return status
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return status

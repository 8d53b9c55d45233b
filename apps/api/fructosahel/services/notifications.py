"""Deferred loading of the user-dependent notification prompt.

The gate renders its children straight away. Loading the prompt happens in a
separate task scheduled on the running loop after mount, and only in the
client context. The task waits for the session identity instead of failing
when nobody is signed in yet, and unmounting discards whatever it produced.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from fructosahel.models import RenderContext
from fructosahel.services.locale import translate

logger = logging.getLogger("fructosahel.notifications")

T = TypeVar("T")


@dataclass(frozen=True)
class NotificationPrompt:
    user_id: str
    title: str
    body: str
    enable_label: str
    dismiss_label: str


PromptFactory = Callable[[str], NotificationPrompt]
PromptLoader = Callable[[], Awaitable[PromptFactory]]


def build_prompt(user_id: str, messages: Mapping[str, str]) -> NotificationPrompt:
    return NotificationPrompt(
        user_id=user_id,
        title=translate(messages, "notifications.prompt.title"),
        body=translate(messages, "notifications.prompt.body"),
        enable_label=translate(messages, "notifications.prompt.enable"),
        dismiss_label=translate(messages, "notifications.prompt.dismiss"),
    )


def prompt_loader(messages: Mapping[str, str]) -> PromptLoader:
    async def load() -> PromptFactory:
        return lambda user_id: build_prompt(user_id, messages)

    return load


class SessionIdentity:
    def __init__(self, user_id: str | None = None) -> None:
        self._user_id = user_id
        self._resolved = asyncio.Event()
        if user_id is not None:
            self._resolved.set()

    @property
    def user_id(self) -> str | None:
        return self._user_id

    def resolve(self, user_id: str) -> None:
        self._user_id = user_id
        self._resolved.set()

    async def wait(self) -> str | None:
        await self._resolved.wait()
        return self._user_id


class NotificationGate:
    def __init__(
        self,
        loader: PromptLoader,
        identity: SessionIdentity,
        *,
        context: RenderContext = RenderContext.CLIENT,
    ) -> None:
        self._loader = loader
        self._identity = identity
        self.context = context
        self.prompt: NotificationPrompt | None = None
        self._task: asyncio.Task[NotificationPrompt | None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def render(self, children: T) -> T:
        return children

    def mount(self) -> asyncio.Task[NotificationPrompt | None] | None:
        if self.context is RenderContext.SERVER:
            return None
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._activate())
        return self._task

    def unmount(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.prompt = None

    async def _activate(self) -> NotificationPrompt | None:
        try:
            factory = await self._loader()
        except Exception:
            logger.exception("Notification prompt failed to load")
            return None

        user_id = await self._identity.wait()
        self.prompt = factory(user_id)
        logger.debug("Notification prompt ready user_id=%s", user_id)
        return self.prompt

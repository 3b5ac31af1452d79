"""Invoke helpers — call sync or async handlers uniformly.

Switchmap handlers can be ``def`` or ``async def``. The dispatcher must
await both the same way, so the sync/async check lives in exactly one
place.

Usage::

    from switchmap._internal.invoke import invoke

    result = await invoke(handler, item, *args, **kwargs)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync — returns immediately, no await needed
        def send_email(contact):
            outbox.append(contact)

        # async — returns coroutine, awaited automatically
        async def send_text(contact):
            await sms.send(contact["phone"])

    Exceptions raised by the handler, or by the awaitable it returns,
    propagate to the caller untouched. ``SwitchMap.push()`` relies on this:
    a failing handler surfaces as the failure of that push, with its
    original type and message, and is never logged, wrapped or retried.
    """
    outcome = handler(*args, **kwargs)
    if not inspect.isawaitable(outcome):
        return outcome
    return await outcome

"""Session – transactional decorator."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from mp_session.session.aio import AsyncSession
from mp_session.session.sync import Session

F = TypeVar("F", bound=Callable[..., Any])


def transactional(session: Session[Any] | AsyncSession[Any] | str = "_session") -> Callable[[F], F]:
    """Decorator: run each call of the wrapped function in ``session.transact``.

    *session* is either a session instance or the name of the attribute
    holding one on the decorated method's ``self``. A missing or ``None``
    attribute on an instance runs the function without a transaction; a
    first argument that cannot carry the attribute (no ``__dict__``, as with
    ``int`` or ``str``) raises :class:`TypeError`. Coroutine functions
    need an :class:`AsyncSession`, plain functions a :class:`Session`.

    Decorated calls made while a transaction is running join it, so::

        class Repo:
            def __init__(self, session: Session[None]) -> None:
                self._session = session

            @transactional()
            def save(self, item: Item) -> None: ...

            @transactional()
            def save_all(self, items: list[Item]) -> None:
                for item in items:
                    self.save(item)  # one commit for the whole batch
    """

    def resolve(args: tuple[Any, ...]) -> Any:
        if not isinstance(session, str):
            return session
        if not args or not (hasattr(args[0], session) or hasattr(args[0], "__dict__")):
            raise TypeError(f"transactional({session!r}) can only decorate methods")
        return getattr(args[0], session, None)

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                target = resolve(args)
                if target is None:
                    return await func(*args, **kwargs)
                if not isinstance(target, AsyncSession):
                    raise TypeError(
                        f"{func.__qualname__} is a coroutine function and needs an AsyncSession, "
                        f"got {type(target).__name__}"
                    )
                return await target.transact(lambda _: func(*args, **kwargs))

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            target = resolve(args)
            if target is None:
                return func(*args, **kwargs)
            if not isinstance(target, Session):
                raise TypeError(
                    f"{func.__qualname__} needs a Session, got {type(target).__name__}"
                )
            return target.transact(lambda _: func(*args, **kwargs))

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["transactional"]

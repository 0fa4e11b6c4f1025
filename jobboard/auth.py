"""
Authentication collaborator and per-request auth context.

The board never reads "the current user" from ambient global state. Instead:

1. An AuthProvider owns sign-in state and publishes immutable AuthState
   snapshots to subscribers via on_auth_state_changed(callback), which
   returns an unsubscribe function.
2. An AuthContext subscribes on attach(), unsubscribes on detach(), and
   replaces its snapshot wholesale on every notification.
3. Views receive the AuthContext and read `context.user` from it.

SessionAuthProvider is the built-in provider: it keeps the signed-in user in
the Flask session and accepts a shared password, the same scheme the board
used for its single-password login page.

Usage:
    provider = SessionAuthProvider(session, password=settings.login_password)
    context = AuthContext(provider)
    context.attach()
    try:
        if context.user: ...
    finally:
        context.detach()
"""

import hmac
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, MutableMapping, Optional

from jobboard.errors import AuthenticationError

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


@dataclass(frozen=True)
class User:
    """A signed-in user as seen by the board."""
    id: str
    email: str
    display_name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "email": self.email, "display_name": self.display_name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            email=str(data.get("email", "")),
            display_name=str(data.get("display_name", "")),
        )


@dataclass(frozen=True)
class AuthState:
    """Immutable auth snapshot delivered to subscribers."""
    user: Optional[User] = None
    is_loading: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


LOADING_STATE = AuthState(user=None, is_loading=True)

AuthCallback = Callable[[AuthState], None]
Unsubscribe = Callable[[], None]


class AuthProvider(ABC):
    """
    Auth collaborator interface.

    Implementations deliver the current snapshot to a new subscriber
    immediately and again after every state change.
    """

    @abstractmethod
    def on_auth_state_changed(self, callback: AuthCallback) -> Unsubscribe:
        """Subscribe to auth state; returns a function that unsubscribes."""
        pass

    @abstractmethod
    def login(self, **credentials: Any) -> None:
        """Start a session. Raises AuthenticationError on bad credentials."""
        pass

    @abstractmethod
    def logout(self) -> None:
        """End the current session."""
        pass


class SubscriptionMixin:
    """Subscriber bookkeeping shared by providers."""

    def __init__(self) -> None:
        self._subscribers: List[AuthCallback] = []

    def _subscribe(self, callback: AuthCallback) -> Unsubscribe:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, state: AuthState) -> None:
        for callback in list(self._subscribers):
            callback(state)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class SessionAuthProvider(SubscriptionMixin, AuthProvider):
    """
    Shared-password provider backed by a session mapping.

    Args:
        session: Mutable mapping persisted per browser (flask.session)
        password: Password accepted by login()
    """

    def __init__(self, session: MutableMapping[str, Any], password: str):
        super().__init__()
        self._session = session
        self._password = password

    def current_state(self) -> AuthState:
        data = self._session.get(SESSION_USER_KEY)
        if not data:
            return AuthState(user=None, is_loading=False)
        try:
            return AuthState(user=User.from_dict(data), is_loading=False)
        except (KeyError, TypeError):
            logger.warning("Discarding malformed session user")
            self._session.pop(SESSION_USER_KEY, None)
            return AuthState(user=None, is_loading=False)

    def on_auth_state_changed(self, callback: AuthCallback) -> Unsubscribe:
        unsubscribe = self._subscribe(callback)
        callback(self.current_state())
        return unsubscribe

    def login(self, email: str = "", password: str = "", **_: Any) -> None:
        """
        Sign in with an email and the shared password.

        Raises:
            AuthenticationError: If the email is blank or the password is wrong
        """
        email = (email or "").strip().lower()
        if not email:
            raise AuthenticationError("Email is required")
        if not hmac.compare_digest(password.encode(), self._password.encode()):
            logger.info(f"Rejected sign-in for {email}")
            raise AuthenticationError("Invalid password")

        user = User(id=email, email=email, display_name=email.split("@")[0])
        self._session[SESSION_USER_KEY] = user.to_dict()
        if hasattr(self._session, "permanent"):
            self._session.permanent = True
        logger.info(f"User signed in: {email}")
        self._notify(AuthState(user=user, is_loading=False))

    def logout(self) -> None:
        state = self.current_state()
        self._session.clear()
        if state.user:
            logger.info(f"User signed out: {state.user.email}")
        self._notify(AuthState(user=None, is_loading=False))


class AuthContext:
    """
    Explicit holder of the current auth state for one consumer.

    Starts in the loading state. attach() subscribes to the provider and
    detach() unsubscribes; each notification replaces the whole snapshot.
    """

    def __init__(self, provider: AuthProvider):
        self.provider = provider
        self._state: AuthState = LOADING_STATE
        self._unsubscribe: Optional[Unsubscribe] = None

    def _replace(self, state: AuthState) -> None:
        self._state = state

    def attach(self) -> "AuthContext":
        if self._unsubscribe is None:
            self._unsubscribe = self.provider.on_auth_state_changed(self._replace)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def user(self) -> Optional[User]:
        return self._state.user

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def __enter__(self) -> "AuthContext":
        return self.attach()

    def __exit__(self, *exc_info: Any) -> None:
        self.detach()

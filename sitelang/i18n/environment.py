"""
Access to the visitor's browsing context.

A LocaleEnvironment answers three questions for the resolver and the
redirector: are we in a browsing context at all, where is the visitor
(path and query string), and what language does the platform report. It
also provides the full-navigation primitive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class LocaleEnvironment(Protocol):
    is_browser: bool
    pathname: str
    query: Mapping[str, Any]
    platform_language: Optional[str]

    def navigate(self, path: str) -> None:
        """Full navigation (page reload) to path"""
        ...


@dataclass
class StaticEnvironment:
    """Environment with explicit values. Navigations are recorded, not performed."""

    pathname: str = "/"
    query: Mapping[str, Any] = field(default_factory=dict)
    platform_language: Optional[str] = None
    is_browser: bool = True
    navigations: List[str] = field(default_factory=list)

    def navigate(self, path: str) -> None:
        self.navigations.append(path)

    @property
    def last_navigation(self) -> Optional[str]:
        return self.navigations[-1] if self.navigations else None


@dataclass(frozen=True)
class NullEnvironment:
    """Outside any browsing context. Immutable; navigate() does nothing."""

    pathname: str = "/"
    query: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    platform_language: Optional[str] = None
    is_browser: bool = False

    def navigate(self, path: str) -> None:
        return None


NULL_ENVIRONMENT = NullEnvironment()


class RequestEnvironment:
    """
    Environment view of an incoming Starlette request.

    navigate() only records the target; the middleware turns it into a
    redirect response, which is the server-side form of a full navigation.
    The platform language is configuration, not a request header.
    """

    is_browser = True

    def __init__(self, request: Any, platform_language: Optional[str] = None):
        self._request = request
        self.platform_language = platform_language
        self.redirect_to: Optional[str] = None

    @property
    def pathname(self) -> str:
        return self._request.url.path or "/"

    @property
    def query(self) -> Mapping[str, Any]:
        return self._request.query_params

    def navigate(self, path: str) -> None:
        self.redirect_to = path

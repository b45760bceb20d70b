"""Session-level wiring of link matchers, resolution, and click handling."""

import re
from collections.abc import Awaitable, Callable

from ...utils.logger import get_logger
from ..config.LinkConfig import LinkConfig
from ..matcher.LinkMatcherRegistry import LinkMatcherRegistry
from ..matcher.MatcherOptions import MatcherOptions
from ..pattern.HYPERTEXT_PATTERN import HYPERTEXT_PATTERN
from ..pattern.LinkPattern import LinkPattern
from ..pattern.local_link_pattern import LOCAL_LINK_MATCH_INDEX, local_link_pattern
from ..pattern.MatcherPriority import MatcherPriority
from ..platform.PlatformContext import PlatformContext
from ..resolver.FileExistenceCheck import FileExistenceCheck
from ..resolver.LinkResolver import LinkResolver
from ..resolver.WorkspaceContext import WorkspaceContext
from ..types.callbacks import LinkHandlerCallback, ValidationCallback
from ..types.HostElement import HostElement
from .EditorHost import EditorHost
from .HoverTooltip import HoverTooltip, Scheduler
from .TooltipSurface import TooltipSurface
from .wrap_link_handler import wrap_link_handler

logger = get_logger("handler")


class LinkHandler:
    """Registers the built-in hypertext and local-path matchers for a session.

    Every click handler, built-in or custom, only fires while the platform
    modifier (Cmd on Mac, Ctrl elsewhere) is held.
    """

    def __init__(
        self,
        registry: LinkMatcherRegistry,
        context: PlatformContext,
        editor_host: EditorHost,
        tooltip_surface: TooltipSurface,
        *,
        exists_check: FileExistenceCheck | None = None,
        workspace: WorkspaceContext | None = None,
        config: LinkConfig | None = None,
        hypertext_pattern: str | re.Pattern[str] | None = None,
        call_later: Scheduler | None = None,
    ):
        self._registry = registry
        self._context = context
        self._editor_host = editor_host
        self._config = config or LinkConfig()
        self._resolver = LinkResolver(context, exists_check=exists_check, workspace=workspace)
        self._tooltip = HoverTooltip(
            tooltip_surface,
            context.follow_link_message,
            delay=self._config.hover_delay_seconds,
            call_later=call_later,
        )

        self.hypertext_matcher_id: int | None = None
        if self._config.hypertext_enabled:
            self.hypertext_matcher_id = self.register_hypertext_link_handler(hypertext_pattern or HYPERTEXT_PATTERN)
        self.local_matcher_id = self.register_local_link_handler()

    @property
    def registry(self) -> LinkMatcherRegistry:
        return self._registry

    @property
    def resolver(self) -> LinkResolver:
        return self._resolver

    @property
    def local_link_pattern(self) -> LinkPattern:
        return local_link_pattern(self._context.family)

    def register_hypertext_link_handler(self, pattern: str | re.Pattern[str]) -> int:
        """Register the web link matcher; the host performs the navigation itself."""
        return self._registry.register(
            pattern,
            self._wrap_link_handler(lambda uri: True),
            MatcherOptions(
                validation_callback=self._validate_web_link,
                priority=MatcherPriority.HYPERTEXT,
            ),
        )

    def register_custom_link_handler(
        self,
        pattern: str | re.Pattern[str],
        handler: Callable[[str], bool | None | Awaitable[bool | None]],
        match_index: int | None = None,
        validation_callback: ValidationCallback | None = None,
    ) -> int:
        return self._registry.register(
            pattern,
            self._wrap_link_handler(handler),
            MatcherOptions(
                match_index=match_index or 0,
                validation_callback=validation_callback,
                priority=MatcherPriority.CUSTOM,
            ),
        )

    def register_local_link_handler(self) -> int:
        return self._registry.register(
            self.local_link_pattern.regex,
            self._wrap_link_handler(self._handle_local_link),
            MatcherOptions(
                match_index=LOCAL_LINK_MATCH_INDEX,
                validation_callback=self._validate_local_link,
                priority=MatcherPriority.LOCAL_PATH,
            ),
        )

    def dispose(self) -> None:
        """Tear down every matcher registered for this session."""
        self._registry.clear()

    def _wrap_link_handler(
        self, handler: Callable[[str], bool | None | Awaitable[bool | None]]
    ) -> LinkHandlerCallback:
        return wrap_link_handler(self._context.modifier_pressed, handler)

    async def _handle_local_link(self, link: str) -> None:
        resolved = await self._resolver.resolve(link)
        if not resolved:
            return
        path = self._context.path_module
        target = path.normpath(path.abspath(resolved))
        try:
            await self._editor_host.open_path(target)
        except Exception as e:
            logger.warning("Failed to open %s: %s", target, e)
            raise

    async def _validate_local_link(self, link: str, element: HostElement) -> bool:
        resolved = await self._resolver.resolve(link)
        if resolved:
            self._tooltip.attach(element)
        return bool(resolved)

    async def _validate_web_link(self, link: str, element: HostElement) -> bool:
        self._tooltip.attach(element)
        return True

from ..config.TermLinkConfig import TermLinkConfig
from ..handler.LinkHandler import LinkHandler
from ..matcher.LinkMatcherRegistry import LinkMatcherRegistry
from ..platform.EnvironmentSnapshot import EnvironmentSnapshot
from ..platform.PlatformContext import PlatformContext
from ..platform.PlatformFamily import PlatformFamily
from ._headless import _HeadlessEditorHost, _HeadlessTooltipSurface


def _build_session(
    config: TermLinkConfig,
    platform: str | None,
    workspace: str | None,
) -> LinkHandler:
    """Build a headless link handler for the given platform and workspace.

    Raises:
        ValueError: If ``platform`` is not a known family
    """
    family = PlatformFamily(platform.lower()) if platform else PlatformFamily.detect()
    context = PlatformContext(
        family=family,
        workspace_root=workspace or config.link.workspace_root,
        environment=EnvironmentSnapshot.from_os(),
    )
    return LinkHandler(
        LinkMatcherRegistry(),
        context,
        _HeadlessEditorHost(),
        _HeadlessTooltipSurface(),
        config=config.link,
    )

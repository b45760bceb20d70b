"""Link resolve API function.

Runs the platform-aware resolver on one link string.
Matches CLI: termlinkc link resolve <TEXT>
"""

import asyncio
from collections.abc import Iterator

from ..StageResult import StageResult
from ._build_session import _build_session
from ._output_schemas import LinkResolveOutput


def cmd_resolve(link: str, platform: str | None = None, workspace: str | None = None) -> StageResult:
    """Resolve a link to an existing file path."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.TermLinkConfig import TermLinkConfig

        yield (0.2, "Loading configuration...")
        try:
            config = TermLinkConfig.load()
            handler = _build_session(config, platform, workspace)
        except ValueError as e:
            message = str(e)
            output = LinkResolveOutput(
                errors=[message], warnings=[], link=link, platform=platform or "", success=False
            ).model_dump(mode="python")
            result_obj.complete(message, output, success=False)
            yield (1.0, "Complete")
            return

        resolver = handler.resolver
        yield (0.5, "Expanding path...")
        candidate = resolver.candidate_path(link)

        yield (0.8, "Checking filesystem...")
        resolved = asyncio.run(resolver.resolve(link))
        handler.dispose()

        warnings = []
        if candidate is None:
            warnings.append("Link is not resolvable (missing home directory or workspace)")
        elif resolved is None:
            warnings.append(f"File does not exist: {candidate}")

        output = LinkResolveOutput(
            errors=[],
            warnings=warnings,
            link=link,
            platform=resolver.context.family.value,
            candidate=candidate,
            resolved=resolved,
            success=resolved is not None,
        ).model_dump(mode="python")
        message = f"Resolved to {resolved}" if resolved else f"Not a link: {link}"
        result_obj.complete(message, output, success=resolved is not None)
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Resolving link: {link}",
        progress_callback=do_work,
    )

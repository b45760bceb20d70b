"""Link scan API function.

Scans terminal text line by line and reports the arbitrated link spans.
Matches CLI: termlinkc link scan [FILE]
"""

import asyncio
from collections.abc import Iterator
from pathlib import Path

from ..handler.LinkHandler import LinkHandler
from ..matcher.LinkSpan import LinkSpan
from ..StageResult import StageResult
from ._build_session import _build_session
from ._headless import _HeadlessElement
from ._output_schemas import LinkScanOutput


def _span_kind(handler: LinkHandler, span: LinkSpan) -> str:
    if span.matcher_id == handler.local_matcher_id:
        return "local"
    if span.matcher_id == handler.hypertext_matcher_id:
        return "hypertext"
    return "custom"


def cmd_scan(
    path: str | None = None,
    text: str | None = None,
    platform: str | None = None,
    workspace: str | None = None,
    validate: bool = True,
) -> StageResult:
    """Scan a file (or the given text) for links."""
    source = path or "-"

    def _fail(result_obj: StageResult, message: str, family: str = "", workspace_root: str | None = None) -> None:
        output = LinkScanOutput(
            errors=[message],
            warnings=[],
            source=source,
            platform=family,
            workspace_root=workspace_root,
            links=[],
            count=0,
            validated=False,
            success=False,
        ).model_dump(mode="python")
        result_obj.complete(message, output, success=False)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.TermLinkConfig import TermLinkConfig

        yield (0.1, "Loading configuration...")
        try:
            config = TermLinkConfig.load()
        except ValueError as e:
            _fail(result_obj, str(e))
            yield (1.0, "Complete")
            return

        yield (0.2, "Building link handler...")
        try:
            handler = _build_session(config, platform, workspace)
        except ValueError:
            _fail(result_obj, f"Unknown platform: {platform}")
            yield (1.0, "Complete")
            return
        family = handler.resolver.context.family.value
        workspace_root = handler.resolver.context.workspace_root

        yield (0.3, "Reading input...")
        content = text
        if path is not None:
            try:
                content = Path(path).read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                _fail(result_obj, f"Cannot read {path}: {e}", family, workspace_root)
                yield (1.0, "Complete")
                return
        content = content or ""

        yield (0.5, "Scanning text...")
        found: list[tuple[int, LinkSpan]] = []
        for line_number, line in enumerate(content.splitlines(), start=1):
            found.extend((line_number, span) for span in handler.registry.find_spans(line))

        valid: list[bool | None] = [None] * len(found)
        if validate and found:
            yield (0.7, "Validating links...")
            pairs = [(span, _HeadlessElement()) for _, span in found]
            valid = list(asyncio.run(handler.registry.validate_all(pairs)))

        yield (0.9, "Building output...")
        links = []
        for (line_number, span), is_valid in zip(found, valid):
            entry = {"line": line_number, **span.to_dict(), "kind": _span_kind(handler, span)}
            if validate:
                entry["valid"] = is_valid
            links.append(entry)

        handler.dispose()
        output = LinkScanOutput(
            errors=[],
            warnings=[],
            source=source,
            platform=family,
            workspace_root=workspace_root,
            links=links,
            count=len(links),
            validated=validate,
            success=True,
        ).model_dump(mode="python")
        result_obj.complete(f"Found {len(links)} link(s) in {source}", output, success=True)
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Scanning for links: {source}",
        progress_callback=do_work,
    )

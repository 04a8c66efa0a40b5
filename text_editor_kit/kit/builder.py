"""Editor kit builder.

The builder merges three groups of priority-tagged capabilities into one
``ComposedKit``:

1. the table capabilities (priorities 10-40),
2. the capabilities produced by the resolved dynamic extension creators,
3. the static capabilities configured from the caller's options.

Entries whose capability is ``None`` (an extension creator opting out for the
current mode/context) are dropped. The rest are stable-sorted by priority, so
entries sharing a priority keep the construction order above.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterable, List, Optional, Sequence

from ..core.config import FactoryFailurePolicy
from .base import BuildContext, Capability, ComposedKit, KitEntry, KitExtensionCreator, TextEditorMode
from .blob import BlobResolver
from .errors import ExtensionFactoryError, InvalidExtensionError
from .extensions import (
    CODE_BLOCK_OPTIONS,
    CODE_OPTIONS,
    HEADING_LEVELS,
    LIST_TYPES,
    LOADING_IMG_SRC,
    PRIORITY_BASE,
    PRIORITY_CODE,
    PRIORITY_CODE_BLOCK,
    PRIORITY_FILE,
    PRIORITY_HARD_BREAK,
    PRIORITY_IMAGE,
    PRIORITY_LIST_KEYMAP,
    PRIORITY_NODE_UUID,
    PRIORITY_PARAGRAPH,
    PRIORITY_SUBMIT,
    TABLE_KIT_EXTENSIONS,
    BaseKit,
    CodeBlockExtension,
    CodeExtension,
    FileExtension,
    HardBreakExtension,
    ImageExtension,
    ListKeymap,
    NodeUuidExtension,
    ParagraphExtension,
    SubmitExtension,
)
from .options import EditorKitOptions

logger = logging.getLogger(__name__)


def sort_kit_entries(entries: Iterable[KitEntry]) -> List[Capability]:
    """Drop opted-out entries, stable-sort by priority and strip the priorities."""
    present = [(priority, ext) for priority, ext in entries if ext is not None]
    present.sort(key=lambda entry: entry[0])
    return [ext for _, ext in present]


class EditorKitBuilder:
    """
    Builds the ``ComposedKit`` from resolved creators and caller options.

    Attributes:
        blob_resolver: Callback the image capability uses to turn uploaded
            files into fetchable references. Caller overrides of
            ``image.get_blob_ref`` take precedence.
        failure_policy: ``fail_fast`` turns any extension creator error into
            a build failure; ``isolate`` logs it and leaves that creator's
            capability out.
    """

    def __init__(
        self,
        blob_resolver: Optional[BlobResolver] = None,
        failure_policy: FactoryFailurePolicy = FactoryFailurePolicy.fail_fast,
    ) -> None:
        self.blob_resolver = blob_resolver
        self.failure_policy = FactoryFailurePolicy(failure_policy)

    async def build(
        self,
        creators: Sequence[KitExtensionCreator],
        options: Optional[EditorKitOptions] = None,
    ) -> ComposedKit:
        opts = options or EditorKitOptions()
        mode = opts.effective_mode
        context = opts.build_context()

        model_entries = await self.invoke_creators(creators, mode, context)
        static_entries = self.static_entries(mode, opts)
        extensions = sort_kit_entries([*TABLE_KIT_EXTENSIONS, *model_entries, *static_entries])

        kit = ComposedKit(options=opts.model_dump(exclude_none=True), extensions=tuple(extensions))
        logger.info(
            "EditorKitBuilder: built kit mode=%s extensions=%d dynamic=%d",
            mode.value,
            len(kit),
            sum(1 for _, ext in model_entries if ext is not None),
        )
        return kit

    async def invoke_creators(
        self,
        creators: Sequence[KitExtensionCreator],
        mode: TextEditorMode,
        context: BuildContext,
    ) -> List[KitEntry]:
        """Invoke every creator once, in order, and collect its entry."""
        entries: List[KitEntry] = []
        for creator in creators:
            try:
                ext = await self._invoke(creator, mode, context)
            except ExtensionFactoryError as exc:
                if self.failure_policy is not FactoryFailurePolicy.isolate:
                    raise
                logger.warning(
                    "EditorKitBuilder: skipping extension factory name=%s priority=%s error=%s",
                    creator.name,
                    creator.priority,
                    type(exc.__cause__ or exc).__name__,
                )
                continue
            if ext is None:
                logger.debug("EditorKitBuilder: factory name=%s opted out for mode=%s", creator.name, mode.value)
            entries.append((creator.priority, ext))
        return entries

    async def _invoke(
        self, creator: KitExtensionCreator, mode: TextEditorMode, context: BuildContext
    ) -> Optional[Capability]:
        try:
            result: Any = creator.create(mode, context)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            raise ExtensionFactoryError(creator.name, creator.priority, f"{type(exc).__name__}: {exc}") from exc

        if result is not None and not isinstance(result, Capability):
            raise InvalidExtensionError(creator.name, creator.priority, result)
        return result

    def static_entries(self, mode: TextEditorMode, opts: EditorKitOptions) -> List[KitEntry]:
        """Configure the static capabilities for ``mode``, honoring the caller's toggles."""
        base_options = {
            "code": False,
            "code_block": False,
            "hard_break": False,
            "heading": {"levels": list(HEADING_LEVELS)},
        }
        if opts.history is False:
            base_options["history"] = False

        entries: List[KitEntry] = [
            (PRIORITY_BASE, BaseKit.configure(base_options)),
            (PRIORITY_CODE_BLOCK, CodeBlockExtension.configure(CODE_BLOCK_OPTIONS)),
            (PRIORITY_CODE, CodeExtension.configure(CODE_OPTIONS)),
            (PRIORITY_HARD_BREAK, HardBreakExtension.configure(shortcuts=mode.value)),
        ]

        if opts.submit is not False:
            submit = opts.submit.overrides() if opts.submit is not None else {}
            entries.append(
                (PRIORITY_SUBMIT, SubmitExtension.configure({"use_mod_key": mode is TextEditorMode.full, **submit}))
            )

        if mode is TextEditorMode.compact:
            entries.append((PRIORITY_PARAGRAPH, ParagraphExtension.configure()))

        entries.append((PRIORITY_LIST_KEYMAP, ListKeymap.configure(list_types=LIST_TYPES)))
        entries.append((PRIORITY_NODE_UUID, NodeUuidExtension))

        if opts.file is not False:
            file = opts.file.overrides() if opts.file is not None else {}
            entries.append((PRIORITY_FILE, FileExtension.configure({"inline": True, **file})))

        if opts.image is not False:
            image = opts.image.overrides() if opts.image is not None else {}
            entries.append(
                (
                    PRIORITY_IMAGE,
                    ImageExtension.configure(
                        {
                            "inline": True,
                            "loading_img_src": LOADING_IMG_SRC,
                            "get_blob_ref": self._get_blob_ref,
                            **image,
                        }
                    ),
                )
            )

        return entries

    async def _get_blob_ref(self, file: Any, name: Optional[str], size: Optional[int]) -> Any:
        if self.blob_resolver is None:
            raise RuntimeError("No blob resolver configured for the image capability")
        return await self.blob_resolver(file, name, size)

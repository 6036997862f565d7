"""Cache-backed entry point tying the parser, registry and options together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from class_select.config import ClassSelectConfig
from class_select.model.options import OptionSet
from class_select.model.registry import ClassRegistry
from class_select.options.assembler import assemble_options
from class_select.options.field import CLASS_FIELD_KEY, merge_field_options
from class_select.options.labels import ContextLabels
from class_select.options.texts import TextProvider
from class_select.registry.builder import build_registry
from class_select.store.cache import Cache, MemoryCache

__all__ = ["ClassSelect", "CssSource", "OptionsFilter"]

logger = logging.getLogger(__name__)

CssSource = str | Callable[[], str | None] | None
OptionsFilter = Callable[[OptionSet, str], OptionSet]


class ClassSelect:
    """Offer CSS classes declared in a stylesheet as class field options.

    Every extension point is injected:

    - ``config`` sets the variable prefix, declaration marker and cache name;
    - ``css_source`` is the CSS text, or a callable returning it;
    - ``cache`` stores the built registry (an in-memory slot by default);
    - ``texts`` supplies interface strings;
    - ``context_labels`` names contexts in group labels;
    - ``options_filter`` may adjust each assembled option set.

    The registry is built on first use after a cache miss and reused until
    :meth:`flush_cache` is called.
    """

    def __init__(
        self,
        config: ClassSelectConfig | None = None,
        *,
        css_source: CssSource = None,
        cache: Cache | None = None,
        texts: Callable[[str], str] | None = None,
        context_labels: Callable[[str], str] | None = None,
        options_filter: OptionsFilter | None = None,
    ) -> None:
        self.config = config or ClassSelectConfig()
        self.texts = texts or TextProvider()
        self.context_labels = context_labels or ContextLabels(texts=self.texts)
        self.cache = cache if cache is not None else MemoryCache(self.config.cache_key)
        self._css_source = css_source
        self._options_filter = options_filter

    # --- source --------------------------------------------------------------

    def css_code(self) -> str:
        source = self._css_source
        if callable(source):
            source = source()
        return source or ""

    # --- registry ------------------------------------------------------------

    def registry(self) -> ClassRegistry:
        """Return the cached registry, building and storing it on a miss."""
        cached = self.cache.get()
        if cached is not None:
            try:
                return ClassRegistry.from_dict(cached)
            except ValueError as exc:
                logger.warning("Discarding malformed cached registry: %s", exc)

        registry = build_registry(self.css_code(), self.config.marker_name)
        logger.info(
            "Rebuilt class registry %r: %d scope(s), %d group(s)",
            self.cache.name,
            len(registry.scopes),
            len(registry.optgroup),
        )
        self.cache.set(registry.to_dict())
        return registry

    def get_classes(self, scope: str = "") -> dict:
        """Return the whole registry as a dict, or one scope's ``class -> label`` map."""
        registry = self.registry()
        if not scope:
            return registry.to_dict()
        return registry.lookup(scope)

    def flush_cache(self) -> None:
        """Drop the stored registry so the next lookup rebuilds it."""
        self.cache.delete()
        logger.info("Flushed class registry cache %r", self.cache.name)

    # --- options -------------------------------------------------------------

    def options_for(self, context_id: str) -> OptionSet:
        option_set = assemble_options(
            self.registry(),
            context_id,
            self.context_labels,
            self.config.prefix,
            self.texts,
        )
        if self._options_filter is not None:
            option_set = self._options_filter(option_set, context_id)
        return option_set

    def set_class_options(
        self,
        field: Mapping[str, object],
        field_key: str = "",
        form_key: str = "",
    ) -> dict[str, object]:
        """Add class options to a host field; fields other than ``class`` pass through."""
        if field_key != CLASS_FIELD_KEY:
            return dict(field)
        return merge_field_options(field, self.options_for(form_key))

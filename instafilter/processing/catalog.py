"""
Filter catalog.

Built once from CATALOG_SOURCES against whatever the installed engine
supports. Entries the engine cannot instantiate, and filters that do not
take an input image, are left out and remembered in ``skipped``.
"""

import locale
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..core import (
    FilterCategory,
    FilterDescriptor,
    SkippedFilter,
    SkipReason,
    translate,
)
from .engine import FilterEngine, FilterHandle, INPUT_IMAGE_KEY
from .parameters import resolve_parameters

logger = logging.getLogger(__name__)


CATALOG_SOURCES: Tuple[Tuple[str, FilterCategory], ...] = (
    # Color
    ("CISepiaTone", FilterCategory.COLOR),
    ("CIColorControls", FilterCategory.COLOR),
    ("CIExposureAdjust", FilterCategory.COLOR),
    ("CIHueAdjust", FilterCategory.COLOR),
    ("CIVibrance", FilterCategory.COLOR),
    ("CIColorMonochrome", FilterCategory.COLOR),
    ("CIColorPosterize", FilterCategory.COLOR),
    ("CIColorInvert", FilterCategory.COLOR),
    ("CIGammaAdjust", FilterCategory.COLOR),
    # Distortion
    ("CIBumpDistortion", FilterCategory.DISTORTION),
    ("CITwirlDistortion", FilterCategory.DISTORTION),
    ("CIPinchDistortion", FilterCategory.DISTORTION),
    ("CIHoleDistortion", FilterCategory.DISTORTION),
    ("CIGlassDistortion", FilterCategory.DISTORTION),
    ("CITorusLensDistortion", FilterCategory.DISTORTION),
    ("CILightTunnel", FilterCategory.DISTORTION),
    ("CIKaleidoscope", FilterCategory.DISTORTION),
    ("CITriangleKaleidoscope", FilterCategory.DISTORTION),
    # Blur
    ("CIGaussianBlur", FilterCategory.BLUR),
    ("CIBoxBlur", FilterCategory.BLUR),
    ("CIMotionBlur", FilterCategory.BLUR),
    ("CIZoomBlur", FilterCategory.BLUR),
    ("CIBokehBlur", FilterCategory.BLUR),
    ("CIDiscBlur", FilterCategory.BLUR),
    ("CIMedianFilter", FilterCategory.BLUR),
    # Stylize
    ("CIPixellate", FilterCategory.STYLIZE),
    ("CICrystallize", FilterCategory.STYLIZE),
    ("CIPointillize", FilterCategory.STYLIZE),
    ("CIEdges", FilterCategory.STYLIZE),
    ("CILineOverlay", FilterCategory.STYLIZE),
    ("CIComicEffect", FilterCategory.STYLIZE),
    ("CIPhotoEffectMono", FilterCategory.STYLIZE),
    ("CIPhotoEffectChrome", FilterCategory.STYLIZE),
    ("CIPhotoEffectFade", FilterCategory.STYLIZE),
    ("CIPhotoEffectInstant", FilterCategory.STYLIZE),
    ("CIPhotoEffectNoir", FilterCategory.STYLIZE),
    ("CIPhotoEffectProcess", FilterCategory.STYLIZE),
    ("CIPhotoEffectTonal", FilterCategory.STYLIZE),
    ("CIPhotoEffectTransfer", FilterCategory.STYLIZE),
    # Light
    ("CIVignette", FilterCategory.LIGHT),
    ("CIBloom", FilterCategory.LIGHT),
    ("CIGloom", FilterCategory.LIGHT),
    ("CISpotLight", FilterCategory.LIGHT),
    # Other
    ("CIUnsharpMask", FilterCategory.OTHER),
    ("CISharpenLuminance", FilterCategory.OTHER),
    ("CINoiseReduction", FilterCategory.OTHER),
    ("CIRandomGenerator", FilterCategory.OTHER),
    ("CICheckerboardGenerator", FilterCategory.OTHER),
)


def display_sort_key(name: str) -> Any:
    """Locale-aware ordering key for display names.

    "ё" collates with "е" and only breaks ties, as in Russian dictionaries;
    the process collation locale (see main.setup_collation) orders the rest.
    """
    folded = name.casefold()
    return locale.strxfrm(folded.replace("ё", "е")), locale.strxfrm(folded)


@dataclass(frozen=True)
class CatalogEntry:
    """A descriptor together with the live engine handle it was probed from."""
    descriptor: FilterDescriptor
    handle: FilterHandle


@dataclass(frozen=True)
class FilterCatalog:
    """Immutable, display-name-sorted set of selectable filters."""
    entries: Tuple[CatalogEntry, ...] = ()
    skipped: Tuple[SkippedFilter, ...] = ()
    _index: Dict[str, CatalogEntry] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        if not self._index:
            object.__setattr__(
                self, "_index", {e.descriptor.identifier: e for e in self.entries}
            )

    @classmethod
    def build(
        cls,
        engine: FilterEngine,
        sources: Iterable[Tuple[str, FilterCategory]] = CATALOG_SOURCES,
        sort_key: Callable[[str], Any] = display_sort_key,
    ) -> "FilterCatalog":
        """Probe every source entry against the engine and build the catalog."""
        entries: List[CatalogEntry] = []
        skipped: List[SkippedFilter] = []
        seen = set()

        for identifier, category in sources:
            if identifier in seen:
                logger.debug(f"Duplicate catalog source ignored: {identifier}")
                continue
            seen.add(identifier)

            handle = engine.instantiate_filter(identifier)
            if handle is None:
                logger.debug(f"Filter not available in engine: {identifier}")
                skipped.append(SkippedFilter(identifier, SkipReason.UNSUPPORTED_IDENTIFIER))
                continue

            input_keys = set(handle.supported_input_keys())
            if INPUT_IMAGE_KEY not in input_keys:
                logger.debug(f"Filter has no image input: {identifier}")
                skipped.append(SkippedFilter(identifier, SkipReason.NO_IMAGE_INPUT))
                continue

            descriptor = FilterDescriptor(
                identifier=identifier,
                display_name=translate(identifier),
                category=category,
                parameters=tuple(resolve_parameters(identifier, input_keys)),
            )
            entries.append(CatalogEntry(descriptor, handle))

        entries.sort(key=lambda e: sort_key(e.descriptor.display_name))
        logger.info(f"Filter catalog built: {len(entries)} filters, {len(skipped)} skipped")
        return cls(entries=tuple(entries), skipped=tuple(skipped))

    def descriptors(self) -> List[FilterDescriptor]:
        return [e.descriptor for e in self.entries]

    def get(self, identifier: str) -> Optional[FilterDescriptor]:
        """Find a descriptor by identifier."""
        entry = self._index.get(identifier)
        return entry.descriptor if entry else None

    def handle(self, identifier: str) -> Optional[FilterHandle]:
        """Live engine handle for an identifier."""
        entry = self._index.get(identifier)
        return entry.handle if entry else None

    def by_category(self) -> Dict[FilterCategory, List[FilterDescriptor]]:
        """Descriptors grouped by category, in category declaration order."""
        grouped: Dict[FilterCategory, List[FilterDescriptor]] = {}
        for category in FilterCategory:
            members = [d for d in self.descriptors() if d.category is category]
            if members:
                grouped[category] = members
        return grouped

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FilterDescriptor]:
        return iter(self.descriptors())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

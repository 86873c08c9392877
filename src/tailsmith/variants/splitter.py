"""Split a raw class string into variant tags and its base utility token."""

from __future__ import annotations

from tailsmith.model.variant import VariantTag
from tailsmith.variants.definitions import VariantCatalog

SEPARATOR = ":"


def split_variants(raw: str, catalog: VariantCatalog) -> tuple[list[VariantTag], str]:
    """Strip recognised ``name:`` prefixes from the head of *raw*.

    Stops at the first segment that is not a known variant; that segment and
    everything after it is the base token, colons included
    (``[mask-type:alpha]``, ``foo:p-4``). The tags come back in canonical
    order: stable-sorted by kind priority, so ``hover:dark:x`` and
    ``dark:hover:x`` give the same list.
    """
    tags: list[VariantTag] = []
    rest = raw
    while True:
        end = rest.find(SEPARATOR)
        if end <= 0:
            break
        tag = catalog.lookup(rest[:end])
        if tag is None:
            break
        tags.append(tag)
        rest = rest[end + 1:]
    return canonical_order(tags), rest


def canonical_order(tags: list[VariantTag]) -> list[VariantTag]:
    """Return *tags* stable-sorted by kind priority."""
    return sorted(tags, key=lambda tag: tag.kind.priority)

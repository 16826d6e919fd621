"""Reusable image predicates for hardware ``supports_image`` checks."""

from collections.abc import Iterable
from typing import Callable

from domain.image.aggregate import Image

ImagePredicate = Callable[[Image], bool]


def any_image(image: Image) -> bool:
    """Accept every image."""
    return True


def id_in(image_ids: Iterable[str]) -> ImagePredicate:
    """Accept images whose id is one of ``image_ids``."""
    accepted = frozenset(image_ids)

    def _id_in(image: Image) -> bool:
        return image.id in accepted

    _id_in.__name__ = f"idIn({sorted(accepted)})"
    return _id_in

"""Named predicates used to filter catalogs during template resolution.

Predicates render as ``name(value)`` so that failures can report exactly
which constraints were applied without dumping the catalog itself.
"""

import re
from collections.abc import Sequence
from typing import Any, Callable, Generic, Optional, TypeVar

from domain.base.exceptions import InvalidArgumentError
from domain.hardware.aggregate import Hardware
from domain.image.aggregate import Image
from domain.image.value_objects import OsFamily

T = TypeVar("T")


class NamedPredicate(Generic[T]):
    """A boolean function of one argument with a descriptive name."""

    def __init__(self, name: str, test: Callable[[T], bool]) -> None:
        self.name = name
        self._test = test

    def __call__(self, value: T) -> bool:
        return bool(self._test(value))

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class AllOf(NamedPredicate[T]):
    """Conjunction of predicates, rendered as ``And(p1, p2, ...)``."""

    def __init__(self, predicates: Sequence[Callable[[T], bool]]) -> None:
        self.predicates = list(predicates)
        super().__init__(
            f"And({', '.join(str(p) for p in self.predicates)})",
            lambda value: all(predicate(value) for predicate in self.predicates),
        )


def all_of(predicates: Sequence[Callable[[T], bool]]) -> Callable[[T], bool]:
    """Combine predicates; a single predicate is returned as is."""
    if len(predicates) == 1:
        return predicates[0]
    if not predicates:
        return NamedPredicate("any()", lambda value: True)
    return AllOf(predicates)


def compile_pattern(selector: str, pattern: str) -> re.Pattern:
    """Compile a user supplied pattern, reporting bad syntax as a caller error."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidArgumentError(
            f"{selector}({pattern}) is not a valid regular expression: {e}",
            details={"selector": selector, "pattern": pattern},
        ) from e


def text_matches(value: Optional[str], pattern: str, compiled: re.Pattern) -> bool:
    """Check a catalog string against a pattern.

    A value matches when it equals the pattern, contains it, or matches it
    as a whole. A missing value never matches.
    """
    if value is None:
        return False
    return value == pattern or pattern in value or compiled.fullmatch(value) is not None


def _text_predicate(
    selector: str, pattern: str, extract: Callable[[Any], Optional[str]]
) -> NamedPredicate:
    compiled = compile_pattern(selector, pattern)
    return NamedPredicate(
        f"{selector}({pattern})",
        lambda resource: text_matches(extract(resource), pattern, compiled),
    )


def image_name(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("imageName", pattern, lambda image: image.name)


def image_description(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("imageDescription", pattern, lambda image: image.description)


def image_version(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("imageVersion", pattern, lambda image: image.version)


def os_name(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("osName", pattern, lambda image: image.operating_system.name)


def os_description(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate(
        "osDescription", pattern, lambda image: image.operating_system.description
    )


def os_version(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("osVersion", pattern, lambda image: image.operating_system.version)


def os_arch(pattern: str) -> NamedPredicate[Image]:
    return _text_predicate("osArch", pattern, lambda image: image.operating_system.arch)


def os_family(family: OsFamily) -> NamedPredicate[Image]:
    return NamedPredicate(
        f"osFamily({family.name})",
        lambda image: image.operating_system.family == family,
    )


def os_64bit(flag: bool) -> NamedPredicate[Image]:
    return NamedPredicate(
        f"os64Bit({flag})",
        lambda image: image.operating_system.is_64bit == flag,
    )


def image_matches(predicate: Callable[[Image], bool]) -> Callable[[Image], bool]:
    """Name a caller supplied image predicate, keeping already named ones."""
    if isinstance(predicate, NamedPredicate):
        return predicate
    return NamedPredicate(
        f"imageMatches({getattr(predicate, '__name__', repr(predicate))})", predicate
    )


def hypervisor(pattern: str) -> NamedPredicate[Hardware]:
    return _text_predicate("hypervisorMatches", pattern, lambda hardware: hardware.hypervisor)


def min_cores(cores: float) -> NamedPredicate[Hardware]:
    return NamedPredicate(f"minCores({cores})", lambda hardware: hardware.cores >= cores)


def min_ram(ram: int) -> NamedPredicate[Hardware]:
    return NamedPredicate(f"minRam({ram})", lambda hardware: hardware.ram >= ram)


def min_disk(disk: float) -> NamedPredicate[Hardware]:
    return NamedPredicate(f"minDisk({disk})", lambda hardware: hardware.disk >= disk)

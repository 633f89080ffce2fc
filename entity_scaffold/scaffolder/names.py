"""Helpers for PHP fully-qualified names.

Names use the PHP namespace separator (``\\``).  A dot is accepted on input
and converted, so ``Domain.Product.ProductEntity`` and
``Domain\\Product\\ProductEntity`` address the same type.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ..errors import MalformedNameError

SEPARATOR = "\\"

_ALT_SEPARATOR = "."


def normalize_fqn(value: str) -> str:
    """Replace dot separators with backslashes."""
    return value.replace(_ALT_SEPARATOR, SEPARATOR)


def split_fqn(fqn: str) -> tuple[str, str]:
    """Split *fqn* into ``(namespace, simple_name)`` at the last separator.

    Raises:
        MalformedNameError: If *fqn* contains no separator.
    """
    normalized = normalize_fqn(fqn)
    index = normalized.rfind(SEPARATOR)
    if index == -1:
        raise MalformedNameError(fqn)
    return normalized[:index], normalized[index + 1:]


def simple_name(fqn: str) -> str:
    """Return the last segment of *fqn*."""
    return split_fqn(fqn)[1]


def absolute(fqn: str) -> str:
    """Return *fqn* with exactly one leading separator.

    Idempotent: ``absolute(absolute(x)) == absolute(x)``.
    """
    normalized = normalize_fqn(fqn)
    if normalized.startswith(SEPARATOR):
        return normalized
    return SEPARATOR + normalized


def relative(fqn: str) -> str:
    """Strip any leading separators from *fqn*."""
    return normalize_fqn(fqn).lstrip(SEPARATOR)


def join(*parts: str) -> str:
    """Join namespace segments, skipping empty ones."""
    return SEPARATOR.join(relative(p) for p in parts if relative(p))


def lower_camel(name: str) -> str:
    """``ProductRepositoryInterface`` -> ``productRepositoryInterface``."""
    if not name:
        return ""
    return name[0].lower() + name[1:]


# ---------------------------------------------------------------------------
# Path mapping
# ---------------------------------------------------------------------------


def fqn_to_path(fqn: str, extension: str = ".php") -> PurePosixPath:
    """Map a root-relative fqn to its source file path.

    ``Domain\\Product\\ProductEntity`` -> ``Domain/Product/ProductEntity.php``
    """
    split_fqn(fqn)
    return PurePosixPath(*relative(fqn).split(SEPARATOR)).with_suffix(extension)


def path_to_fqn(path: str | PurePosixPath, extension: str = ".php") -> str:
    """Inverse of :func:`fqn_to_path`."""
    pure = PurePosixPath(path)
    if extension and pure.suffix == extension:
        pure = pure.with_suffix("")
    return SEPARATOR.join(pure.parts)

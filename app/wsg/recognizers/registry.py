"""Built-in recognizer definitions and name-based selection.

The registry is an ordered tuple assembled once at import time. Selection
by name preserves that order so that match indices stay deterministic.
"""

from collections.abc import Iterable, Sequence

from wsg.recognizers.models import PathSignature, Recognizer

BUILTIN_RECOGNIZERS: tuple[Recognizer, ...] = (
    Recognizer(
        name="Flutter",
        presence_markers=(PathSignature.file("pubspec.yaml"),),
        deletable_markers=(PathSignature.directory("build"),),
    ),
    Recognizer(
        name="NodeJS",
        presence_markers=(PathSignature.file("package.json"),),
        deletable_markers=(PathSignature.directory("node_modules"),),
    ),
    Recognizer(
        name="Rust",
        presence_markers=(PathSignature.file("Cargo.toml"),),
        deletable_markers=(PathSignature.directory("target"),),
    ),
)


class UnknownRecognizerError(Exception):
    """Raised when a recognizer filter names a recognizer that does not exist."""

    def __init__(self, names: Sequence[str], available: Sequence[str]) -> None:
        self.names = tuple(names)
        self.available = tuple(available)
        super().__init__(
            f"Unknown recognizer(s): {', '.join(self.names)}. "
            f"Available: {', '.join(self.available)}"
        )


def _normalize(names: Iterable[str] | None) -> set[str]:
    if not names:
        return set()
    return {name.strip().lower() for name in names if name.strip()}


def select_recognizers(
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    registry: Sequence[Recognizer] = BUILTIN_RECOGNIZERS,
) -> list[Recognizer]:
    """Filter the registry by case-insensitive recognizer names.

    Args:
        include: Names to keep. Empty or None keeps every recognizer.
        exclude: Names to drop, applied after ``include``.
        registry: Recognizers to select from, in priority order.

    Returns:
        Selected recognizers in registry order.

    Raises:
        UnknownRecognizerError: If a name in either list is not registered.
    """
    included = _normalize(include)
    excluded = _normalize(exclude)

    known = {recognizer.name.lower() for recognizer in registry}
    unknown = sorted((included | excluded) - known)
    if unknown:
        raise UnknownRecognizerError(unknown, [r.name for r in registry])

    selected: list[Recognizer] = []
    for recognizer in registry:
        key = recognizer.name.lower()
        if included and key not in included:
            continue
        if key in excluded:
            continue
        selected.append(recognizer)

    return selected

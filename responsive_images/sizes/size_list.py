"""
Ordered breakpoint -> image size mapping.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from responsive_images.errors import EmptyCollection, InvalidConfiguration
from responsive_images.models import SizeSpec


class SizeListTraversal:
    """
    One ordered walk over a SizeList.

    Triggers are ordered from the largest when the list is mobile-first and
    from the smallest otherwise, so the last position is always the size
    used without a media condition.
    """

    def __init__(self, specs: Dict[int, SizeSpec], mobile_first: bool):
        self._specs = specs
        self._triggers = sorted(specs, reverse=mobile_first)
        self._index = -1

    def __iter__(self) -> "SizeListTraversal":
        return self

    def __next__(self) -> Tuple[int, SizeSpec]:
        if self._index + 1 >= len(self._triggers):
            raise StopIteration
        self._index += 1
        trigger = self._triggers[self._index]
        return trigger, self._specs[trigger]

    def __len__(self) -> int:
        return len(self._triggers)

    def is_last(self) -> bool:
        """Whether the current position is the last one of the walk."""
        return self._index == len(self._triggers) - 1


class SizeList:
    """List of image sizes keyed by breakpoint trigger."""

    def __init__(
        self,
        mobile_first: bool = True,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None
    ):
        """
        Initialize an empty size list.

        Args:
            mobile_first: Whether triggers are minimal (True) or maximal (False)
                viewport widths.
            max_width: Width clamp applied to every appended size.
            max_height: Height clamp applied to every appended size.
        """
        self._mobile_first = mobile_first
        self.max_width = max_width
        self.max_height = max_height
        self._specs: Dict[int, SizeSpec] = {}

    @classmethod
    def from_mapping(
        cls,
        sizes: Mapping[int, Any],
        mobile_first: bool = True,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None
    ) -> "SizeList":
        """
        Build a size list from breakpoint -> size definitions.

        Each value is a SizeSpec, a width, a sequence of SizeSpec arguments
        (width, height, crop, transform) or a mapping of SizeSpec keyword
        arguments, e.g.::

            {375: (300, 250, "fill", {"gravity": "face"}), 576: 500}
        """
        size_list = cls(mobile_first, max_width=max_width, max_height=max_height)
        for trigger, definition in sizes.items():
            try:
                trigger = int(trigger)
            except (TypeError, ValueError) as e:
                raise InvalidConfiguration(f"Breakpoint trigger has to be an integer, {trigger!r} given") from e
            size_list.append(trigger, _to_spec(definition))
        return size_list

    def append(self, trigger: int, spec: SizeSpec) -> "SizeList":
        """Set the size for a breakpoint, replacing any size already there."""
        if self.max_width is not None or self.max_height is not None:
            spec = spec.with_clamp(self.max_width, self.max_height)
        self._specs[trigger] = spec
        return self

    @property
    def is_mobile_first(self) -> bool:
        return self._mobile_first

    def is_empty(self) -> bool:
        return not self._specs

    def triggers(self) -> List[int]:
        """Breakpoint triggers in iteration order."""
        return sorted(self._specs, reverse=self._mobile_first)

    def get(self, trigger: int) -> Optional[SizeSpec]:
        return self._specs.get(trigger)

    def widest(self) -> SizeSpec:
        """
        Get the size with the largest effective width.

        Among equally wide sizes the first appended one wins.

        Raises:
            EmptyCollection: When the list is empty.
        """
        if self.is_empty():
            raise EmptyCollection("List of image sizes is empty")
        return max(self._specs.values(), key=lambda spec: spec.effective_width())

    def walk(self) -> SizeListTraversal:
        """
        Start a new ordered walk over the list.

        Raises:
            EmptyCollection: When the list is empty.
        """
        if self.is_empty():
            raise EmptyCollection("List of image sizes is empty")
        return SizeListTraversal(dict(self._specs), self._mobile_first)

    def __iter__(self) -> Iterator[Tuple[int, SizeSpec]]:
        return self.walk()

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, trigger: object) -> bool:
        return trigger in self._specs

    def __repr__(self) -> str:
        order = "mobile-first" if self._mobile_first else "desktop-first"
        return f"SizeList({order}, {dict((t, self._specs[t]) for t in self.triggers())})"


def _to_spec(definition: Any) -> SizeSpec:
    if isinstance(definition, SizeSpec):
        return definition
    if isinstance(definition, int) and not isinstance(definition, bool):
        return SizeSpec(definition)
    try:
        if isinstance(definition, Mapping):
            return SizeSpec(**definition)
        if isinstance(definition, Sequence) and not isinstance(definition, str):
            return SizeSpec(*definition)
    except TypeError as e:
        raise InvalidConfiguration(f"Invalid image size definition {definition!r}: {e}") from e
    raise InvalidConfiguration(f"Unsupported image size definition: {definition!r}")

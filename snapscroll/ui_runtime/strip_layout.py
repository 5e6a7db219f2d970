"""Fixed-size horizontal strip layout and window queries."""

from __future__ import annotations

from dataclasses import dataclass

from snapscroll.api.geometry import Rect
from snapscroll.api.snap import ElementCategory, ItemGeometry

HEADER_INDEX = 0
FOOTER_INDEX = 1


@dataclass(frozen=True, slots=True)
class UniformStripLayout:
    """Lays equally sized items out left to right, flow-layout style.

    The strip is ``section_inset_left``, an optional header, the items separated
    by ``line_spacing``, an optional footer, then ``section_inset_right``.
    Header and footer are reported as supplementary elements.
    """

    item_width: float
    item_count: int
    item_height: float = 0.0
    line_spacing: float = 0.0
    section_inset_left: float = 0.0
    section_inset_right: float = 0.0
    header_width: float = 0.0
    footer_width: float = 0.0

    def __post_init__(self) -> None:
        if self.item_count < 0:
            raise ValueError(f"item_count must be >= 0: {self.item_count!r}")
        for name in (
            "item_width",
            "item_height",
            "line_spacing",
            "section_inset_left",
            "section_inset_right",
            "header_width",
            "footer_width",
        ):
            value = getattr(self, name)
            if not value >= 0:
                raise ValueError(f"{name} must be >= 0: {value!r}")

    @property
    def _items_origin_x(self) -> float:
        return self.section_inset_left + self.header_width

    @property
    def content_width(self) -> float:
        items_width = self.item_count * self.item_width
        if self.item_count > 1:
            items_width += (self.item_count - 1) * self.line_spacing
        return (
            self._items_origin_x + items_width + self.footer_width + self.section_inset_right
        )

    def item_center_x(self, index: int) -> float:
        """Return the horizontal center of the item at ``index``."""
        if not 0 <= index < self.item_count:
            raise IndexError(f"item index out of range: {index!r}")
        pitch = self.item_width + self.line_spacing
        return self._items_origin_x + index * pitch + self.item_width / 2.0

    def all_elements(self) -> list[ItemGeometry]:
        """Return every element in visual left-to-right order."""
        elements: list[ItemGeometry] = []
        if self.header_width > 0:
            elements.append(
                ItemGeometry(
                    index=HEADER_INDEX,
                    center_x=self.section_inset_left + self.header_width / 2.0,
                    width=self.header_width,
                    category=ElementCategory.SUPPLEMENTARY,
                )
            )
        elements.extend(
            ItemGeometry(index=index, center_x=self.item_center_x(index), width=self.item_width)
            for index in range(self.item_count)
        )
        if self.footer_width > 0:
            footer_right = self.content_width - self.section_inset_right
            elements.append(
                ItemGeometry(
                    index=FOOTER_INDEX,
                    center_x=footer_right - self.footer_width / 2.0,
                    width=self.footer_width,
                    category=ElementCategory.SUPPLEMENTARY,
                )
            )
        return elements

    def elements_in(self, rect: Rect) -> list[ItemGeometry]:
        """Return elements whose horizontal extent overlaps ``rect``."""
        return [
            element
            for element in self.all_elements()
            if rect.overlaps_x(element.center_x - element.width / 2.0, element.center_x + element.width / 2.0)
        ]

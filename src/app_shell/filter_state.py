"""
Expense view filter state.

Preset buttons and the custom date range are two controls over one window:
touching the range switches to custom mode, picking a preset clears the range.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.filters import WINDOW_MODES, ExpenseWindow, WindowMode


@dataclass
class ExpenseFilterState:
    mode: WindowMode = "all"
    start: str = ""
    end: str = ""

    def select_preset(self, mode: WindowMode) -> None:
        if mode == "custom" or mode not in WINDOW_MODES:
            raise ValueError(f"Not a preset window: {mode}")
        self.mode = mode
        self.start = ""
        self.end = ""

    def set_range(self, start: str | None = None, end: str | None = None) -> None:
        """Update either bound; any bound set means custom, none means all."""
        if start is not None:
            self.start = start.strip()
        if end is not None:
            self.end = end.strip()
        self.mode = "custom" if self.start or self.end else "all"

    def criteria(self) -> ExpenseWindow:
        if self.mode != "custom":
            return ExpenseWindow(mode=self.mode)
        return ExpenseWindow(mode="custom", start=self.start, end=self.end)

    @classmethod
    def from_params(
        cls, mode: str | None = None, start: str | None = None, end: str | None = None
    ) -> ExpenseFilterState:
        """
        Build state from request-style parameters.

        Range bounds win over the mode, as if the user had typed them last.

        Raises:
            ValueError: If ``mode`` is not a known window mode.
        """
        state = cls()
        if mode and mode != "custom":
            state.select_preset(mode)  # type: ignore[arg-type]
        if start or end:
            state.set_range(start or "", end or "")
        return state

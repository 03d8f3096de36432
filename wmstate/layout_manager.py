"""Choosing layouts and keeping workspaces and tags in step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

from wmstate.tag import Tag
from wmstate.workspace import Workspace


class LayoutMode(Enum):
    """Whether the layout belongs to the tag or to the workspace."""

    TAG = "Tag"
    WORKSPACE = "Workspace"


@dataclass
class LayoutManager:
    """The configured layouts, cycled in order."""

    mode: LayoutMode = LayoutMode.WORKSPACE
    layouts: List[Any] = field(default_factory=list)
    default_layout: Any = None

    def new_layout(self) -> Any:
        """The layout given to new tags: the first configured one."""
        return self.layouts[0] if self.layouts else self.default_layout

    def next_layout(self, layout: Any) -> Any:
        try:
            index = self.layouts.index(layout)
        except ValueError:
            return self.default_layout
        return self.layouts[(index + 1) % len(self.layouts)]

    def previous_layout(self, layout: Any) -> Any:
        try:
            index = self.layouts.index(layout)
        except ValueError:
            return self.default_layout
        return self.layouts[index - 1]

    def update_layouts(
        self, workspaces: Iterable[Workspace], tags: Iterable[Tag]
    ) -> Optional[bool]:
        """Sync each workspace with the tag it shows first.

        Returns None as soon as a workspace shows a tag that is not given.
        """
        tags = list(tags)
        for workspace in workspaces:
            shown = workspace.tags[0]
            tag = next((t for t in tags if t.id == shown), None)
            if tag is None:
                return None
            if self.mode is LayoutMode.WORKSPACE:
                tag.set_layout(workspace.layout, workspace.main_width_percentage)
            else:
                workspace.layout = tag.layout
                workspace.main_width_percentage = tag.main_width_percentage
        return True
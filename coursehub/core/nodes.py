"""
Node kinds and references for the Course → Folder → File hierarchy.

A parent reference is a tagged value (kind + id) so a Folder or File can
never point at both a Course and a Folder at once.

Dependencies: None (pure domain layer)
System role: Shared vocabulary for repository, maintainer and cascade engine
"""

import enum
from dataclasses import dataclass
from uuid import UUID

from coursehub.core.exceptions import ValidationError


class NodeKind(str, enum.Enum):
    """
    Kinds of record participating in the containment hierarchy.

    COURSE: Root of a tree, has no parent
    FOLDER: Inner node, parent is a Course or a Folder
    FILE: Leaf document, parent is a Course or a Folder
    """

    COURSE = "Course"
    FOLDER = "Folder"
    FILE = "File"

    @property
    def is_container(self) -> bool:
        """True for kinds that hold child lists."""
        return self in (NodeKind.COURSE, NodeKind.FOLDER)

    @property
    def is_reviewable(self) -> bool:
        """True for kinds that carry reviews, favorites and a rating."""
        return self in (NodeKind.COURSE, NodeKind.FILE)


REVIEWABLE_KINDS = (NodeKind.COURSE, NodeKind.FILE)
PARENT_KINDS = (NodeKind.COURSE, NodeKind.FOLDER)


@dataclass(frozen=True)
class NodeRef:
    """Kind-tagged pointer to a node."""

    kind: NodeKind
    id: UUID


@dataclass(frozen=True)
class ParentRef(NodeRef):
    """Kind-tagged pointer to the Course or Folder that owns a child."""

    def __post_init__(self) -> None:
        if self.kind not in PARENT_KINDS:
            raise ValidationError(
                f"{self.kind.value} cannot be a parent",
                field="parent",
            )


def parent_from_fields(
    course_id: UUID | None,
    parent_folder_id: UUID | None,
) -> ParentRef:
    """
    Build a parent reference from the two mutually exclusive input fields.

    Args:
        course_id: Owning course, for top-level children
        parent_folder_id: Owning folder, for nested children

    Returns:
        ParentRef: Exactly one of the two, tagged with its kind

    Raises:
        ValidationError: If both or neither are supplied
    """
    if course_id is not None and parent_folder_id is not None:
        raise ValidationError(
            "Specify either a course or a parent folder, not both",
            field="parent",
        )
    if parent_folder_id is not None:
        return ParentRef(NodeKind.FOLDER, parent_folder_id)
    if course_id is not None:
        return ParentRef(NodeKind.COURSE, course_id)
    raise ValidationError(
        "Must link to a course or a parent folder",
        field="parent",
    )


def ensure_reviewable(kind: NodeKind) -> NodeKind:
    """
    Reject kinds that cannot carry reviews or favorites.

    Raises:
        ValidationError: If kind is Folder
    """
    if not kind.is_reviewable:
        raise ValidationError(
            f"Invalid resource type: {kind.value}",
            field="resource_kind",
        )
    return kind

"""File tree node models.

A tree is a plain ``dict`` mapping a name to either a ``FileLeaf`` or a
``DirectoryNode``. The two node classes form a pydantic discriminated union
on their ``type`` field, so a captured tree validates back into the right
node classes when a snapshot is restored.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CaretPosition(BaseModel):
    """Cursor placement inside a file.

    Args:
        row: Zero-based row of the caret.
        col: Zero-based column of the caret.
    """

    row: int = Field(default=0, description="Zero-based caret row")
    col: int = Field(default=0, description="Zero-based caret column")


class FileLeaf(BaseModel):
    """A file in the virtual tree.

    Args:
        type: Always "file" for this node kind.
        content: Raw text content of the file.
        language: Extension-derived language tag (empty if the name has no extension).
        caret_position: Caret placement metadata.
    """

    type: Literal["file"] = "file"
    content: str = Field(default="", description="Raw text content of the file")
    language: str = Field(default="", description="Extension-derived language tag")
    caret_position: CaretPosition = Field(
        default_factory=CaretPosition, description="Caret placement metadata"
    )


class DirectoryNode(BaseModel):
    """A directory in the virtual tree.

    Args:
        type: Always "directory" for this node kind.
        collapsed: Whether the directory is collapsed in the explorer view.
        children: Mapping of child name to child node.
    """

    type: Literal["directory"] = "directory"
    collapsed: bool = Field(default=False, description="Whether the directory is collapsed")
    children: dict[str, "FileItem"] = Field(
        default_factory=dict, description="Mapping of child name to child node"
    )


FileItem = Annotated[Union[FileLeaf, DirectoryNode], Field(discriminator="type")]
FileStructure = dict[str, FileItem]

DirectoryNode.model_rebuild()


def get_file_extension(name: str) -> str:
    """Return the text after the final "." of a name, or "" if there is none."""
    parts = name.split(".")
    return parts[-1] if len(parts) > 1 else ""


def strip_file_extension(name: str) -> str:
    """Return a name without its final extension."""
    extension = get_file_extension(name)
    if not extension:
        return name
    return name[: -(len(extension) + 1)]


def create_file_leaf(name: str) -> FileLeaf:
    """Create an empty file whose language is taken from the name's extension."""
    return FileLeaf(language=get_file_extension(name))


def create_directory_node() -> DirectoryNode:
    """Create an expanded, empty directory."""
    return DirectoryNode()


def copy_file_leaf(source: FileLeaf) -> FileLeaf:
    """Copy a file leaf, including its caret position."""
    return FileLeaf(
        content=source.content,
        language=source.language,
        caret_position=CaretPosition(
            row=source.caret_position.row, col=source.caret_position.col
        ),
    )


def copy_directory_node(source: DirectoryNode) -> DirectoryNode:
    """Recursively clone a directory so the copy shares no nodes with the source."""
    copied = DirectoryNode(collapsed=source.collapsed)
    for name, item in source.children.items():
        if isinstance(item, DirectoryNode):
            copied.children[name] = copy_directory_node(item)
        else:
            copied.children[name] = copy_file_leaf(item)
    return copied

"""Path resolution over a virtual file structure.

Paths are "/"-separated strings. A path starting with "~" is relative to the
tree root; any other path is relative to the present working directory.
Resolution only produces a root-relative string; walking the tree is a
separate step so read-only callers can decline to create directories.
"""

from typing import Optional

from models.nodes import DirectoryNode, FileItem, FileStructure, create_directory_node

PATH_SEPARATOR = "/"
ROOT_MARKER = "~"


def split_components(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    Duplicate, leading and trailing separators produce no segments.
    """
    return [component for component in path.split(PATH_SEPARATOR) if component]


def join_components(components: list[str]) -> str:
    """Join path segments with the separator."""
    return PATH_SEPARATOR.join(components)


def resolve_path(path: str, present_working_directory: str = "") -> str:
    """Turn a possibly-relative path into a root-relative one.

    Args:
        path: Path as given in an action or query.
        present_working_directory: Root-relative working directory ("" for root).

    Returns:
        The root-relative path. Separators are not normalized.
    """
    if path.startswith(ROOT_MARKER):
        return path[len(ROOT_MARKER):]
    if not present_working_directory:
        return path
    return f"{present_working_directory}{PATH_SEPARATOR}{path}"


def normalize_working_directory(path: str, present_working_directory: str = "") -> str:
    """Compute the new working directory for a change-directory request.

    "~" alone, or an empty path, means the root and normalizes to "".
    """
    if not path or path == ROOT_MARKER:
        return ""
    return join_components(split_components(resolve_path(path, present_working_directory)))


def locate_parent(
    structure: FileStructure, path: str, create: bool = True
) -> tuple[Optional[FileStructure], str]:
    """Find the mapping that directly holds the last segment of a path.

    Walks every segment but the last from the root. With ``create`` set, any
    missing intermediate directory is created along the way. Whether the
    final name exists is left to the caller.

    Args:
        structure: Root mapping of the tree.
        path: Root-relative path.
        create: Create missing intermediate directories while walking.

    Returns:
        Tuple of (parent mapping, final name). The parent is None when the
        path is empty, an intermediate segment is missing and ``create`` is
        off, or an intermediate segment is a file.
    """
    components = split_components(path)
    if not components:
        return None, ""

    name = components.pop()
    current = structure
    for component in components:
        node = current.get(component)
        if node is None:
            if not create:
                return None, name
            node = create_directory_node()
            current[component] = node
        if not isinstance(node, DirectoryNode):
            return None, name
        current = node.children

    return current, name


def lookup_node(structure: FileStructure, path: str) -> Optional[FileItem]:
    """Return the node at a root-relative path without modifying the tree."""
    parent, name = locate_parent(structure, path, create=False)
    if parent is None:
        return None
    return parent.get(name)


def lookup_directory(structure: FileStructure, path: str) -> Optional[FileStructure]:
    """Return the children mapping of the directory at a path.

    An empty path names the root, whose mapping is the structure itself.
    """
    if not split_components(path):
        return structure
    node = lookup_node(structure, path)
    if isinstance(node, DirectoryNode):
        return node.children
    return None

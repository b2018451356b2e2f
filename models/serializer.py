"""Text projections of a virtual file structure."""

from models.nodes import DirectoryNode, FileItem, FileStructure
from models.paths import PATH_SEPARATOR, lookup_directory

TREE_INDENT = "  "


def _tree_sort_key(entry: tuple[str, FileItem]) -> tuple[int, str, str]:
    # Case-insensitive first, so "apple" sorts before "Banana"
    name, item = entry
    return (0 if isinstance(item, DirectoryNode) else 1, name.casefold(), name)


def build_tree_string(
    structure: FileStructure, indent_level: int = 0, include_collapsed: bool = False
) -> str:
    """Render a structure as an indented tree, one name per line.

    Within each directory, subdirectories come first and files second, each
    group sorted by name ignoring case. Children of a collapsed directory are
    skipped unless ``include_collapsed`` is set.

    Args:
        structure: Mapping to render.
        indent_level: Nesting depth of ``structure``; each level adds two spaces.
        include_collapsed: Descend into collapsed directories too.

    Returns:
        The rendered tree, with every line newline-terminated ("" for an
        empty structure).
    """
    indent = TREE_INDENT * indent_level
    lines = []
    for name, item in sorted(structure.items(), key=_tree_sort_key):
        lines.append(f"{indent}{name}\n")
        if isinstance(item, DirectoryNode) and (include_collapsed or not item.collapsed):
            lines.append(
                build_tree_string(item.children, indent_level + 1, include_collapsed)
            )
    return "".join(lines)


def _collect_file_paths(structure: FileStructure, prefix: str, paths: list[str]) -> None:
    for name, item in structure.items():
        path = f"{prefix}{PATH_SEPARATOR}{name}"
        if isinstance(item, DirectoryNode):
            _collect_file_paths(item.children, path, paths)
        else:
            paths.append(path)


def list_all_file_paths(structure: FileStructure) -> list[str]:
    """Return every file's absolute path ("/a/b.ts" form), sorted ascending."""
    paths: list[str] = []
    _collect_file_paths(structure, "", paths)
    return sorted(paths)


def list_directory(structure: FileStructure, path: str) -> str:
    """Return an ls-style listing of a directory's immediate children.

    Names are sorted plainly, with no directories-first grouping.

    Args:
        structure: Root mapping of the tree.
        path: Root-relative directory path ("" for the root).

    Returns:
        Newline-joined child names, or "" if the path is not a directory.
    """
    children = lookup_directory(structure, path)
    if children is None:
        return ""
    return "\n".join(sorted(children))

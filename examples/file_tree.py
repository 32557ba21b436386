#!/usr/bin/env python3
"""
Folders and files as a composite tree.

This example demonstrates:
- Building a tree bottom-up from leaves and containers
- Rendering it with one line per node, children indented deeper
- Treating single files and whole folders the same way
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import Container, Leaf, get_tree_stats, print_tree


def build_tree() -> Container:
    """Build the sample structure.

    Root/
    ├── Documents/
    │   └── Text.txt
    └── Photos/
        └── Image.jpg
    """
    documents = Container("Documents", kind="folder")
    documents.add(Leaf("Text.txt", kind="file"))

    photos = Container("Photos", kind="folder")
    photos.add(Leaf("Image.jpg", kind="file"))

    root = Container("Root", kind="folder")
    root.add(documents)
    root.add(photos)
    return root


def main():
    root = build_tree()
    print_tree(root)

    stats = get_tree_stats(root)
    print()
    print(f"{stats['container_nodes']} folders, {stats['leaf_nodes']} files")


if __name__ == "__main__":
    main()

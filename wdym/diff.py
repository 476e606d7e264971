"""
Change summary shown before an existing file is overwritten.

This is a preview heuristic, not a real diff: it compares line counts and
then lines at the same index.
"""

from typing import List

from .terminal import RULE

MAX_CHANGED_LINES = 5


def summarize_changes(old_content: str, new_content: str,
                      max_lines: int = MAX_CHANGED_LINES) -> List[str]:
    """Return the summary as a list of output lines."""
    old_lines = old_content.split("\n")
    new_lines = new_content.split("\n")

    delta = len(new_lines) - len(old_lines)
    if delta > 0:
        out = [f"  {delta} additions (+)"]
    elif delta < 0:
        out = [f"  {-delta} deletions (-)"]
    else:
        out = ["  Content modified"]

    if old_content == new_content:
        return out

    out.extend(["", "Key changes:"])
    shown = 0
    for i, line in enumerate(new_lines):
        if shown >= max_lines:
            break
        if i >= len(old_lines):
            out.append(f"  + {line}")
            shown += 1
        elif old_lines[i] != line:
            if old_lines[i]:
                out.append(f"  - {old_lines[i]}")
            out.append(f"  + {line}")
            shown += 1

    if len(new_lines) > max_lines or len(old_lines) > max_lines:
        out.append("  ... and more changes")
    return out


def print_diff(file_path: str, old_content: str, new_content: str,
               max_lines: int = MAX_CHANGED_LINES) -> None:
    print(f"\n📝 Changes for {file_path}:")
    print(RULE)
    for line in summarize_changes(old_content, new_content, max_lines):
        print(line)
    print(RULE)

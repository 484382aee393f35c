from __future__ import annotations

"""
Analysis Prompt Assembler.

Turns the directory tree and the collected file contents into the single text
prompt sent to the completion service. Assembly is a pure function of its
inputs: identical arguments always produce the identical string.
"""

import math
import posixpath
from typing import List, Mapping, Optional

FALLBACK_LANGUAGE_TAG = "plaintext"
CHARS_PER_TOKEN_AVG = 4

_INSTRUCTIONS = """\
### Codebase Analysis:

For each file:
1. Provide a brief explanation of what the file does.
2. Explain how it fits within the overall program.
3. Identify any other files it interacts with or depends on.
4. Provide recommendations for improvements or best practices.

Please format the response as follows for each file:

### [Relative/File Path]

**Purpose:**
[Explanation of the file's purpose]

**Role in the Project:**
[Description of how it fits into the project]

**Dependencies and Interactions:**
[List of other files it interacts with or depends on]

**Recommendations:**
[Suggestions for improvements or best practices]

---
Here are the files and their contents:"""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def assemble_prompt(
        project_name: str,
        directory_tree: Optional[str],
        file_records: Mapping[str, str],
) -> str:
    """
    Build the full analysis prompt.

    Layout: an introduction naming the project, the directory tree in a
    fenced block (only when a non-empty tree is given), the per-file
    instructions and response template, then one fenced block per file in
    the mapping's iteration order.

    Args:
        project_name: Name used in the introduction.
        directory_tree: Rendered tree, or None to omit the section.
        file_records: Relative path to file content.

    Returns:
        str: The assembled prompt.
    """
    tree = (directory_tree or "").strip()
    sections: List[str] = []

    if tree:
        sections.append(
            f'I am analyzing a codebase for a project named "{project_name}". '
            "Below is the directory structure followed by the files and their contents."
        )
        sections.append(f"### Directory Structure:\n```\n{tree}\n```")
    else:
        sections.append(
            f'I am analyzing a codebase for a project named "{project_name}". '
            "Below are the files along with their contents."
        )

    sections.append(_INSTRUCTIONS)
    sections.append("\n\n".join(
        format_file_block(path, content) for path, content in file_records.items()
    ))

    return "\n\n".join(sections) + "\n"


def format_file_block(rel_path: str, content: str) -> str:
    """Render one file as a heading followed by a fenced code block."""
    return f"#### {rel_path}\n```{language_tag(rel_path)}\n{content}\n```"


def language_tag(rel_path: str) -> str:
    """
    Infer the code fence language from a file extension.

    The extension is lower-cased and stripped of its dot. Files without an
    extension, dotfiles included ('.env', 'Makefile'), use 'plaintext'.
    """
    _, ext = posixpath.splitext(posixpath.basename(rel_path))
    tag = ext[1:].lower()
    return tag or FALLBACK_LANGUAGE_TAG


def estimate_tokens(text: str) -> int:
    """Rough token count using the average characters-per-token ratio."""
    return math.ceil(len(text) / CHARS_PER_TOKEN_AVG)

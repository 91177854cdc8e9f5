# civra/core/parser.py
"""
Parser for the civra command markup embedded in LLM responses.

A response is free prose with at most one command block:

    <dec-code>
      <dec-write file_path="app/page.tsx">...</dec-write>
      <dec-delete file_path="old.tsx" />
      <dec-rename original_file_path="a.tsx" new_file_path="b.tsx" />
      <dec-add-dependency>zod</dec-add-dependency>
    </dec-code>

Nothing here raises: markup that does not match is skipped and the caller
gets fewer operations.
"""

import logging
import re
from typing import List, Optional, Tuple

from .models import (
    AddDependencyOperation,
    DeleteOperation,
    FileOperation,
    ParsedResponse,
    RenameOperation,
    WriteOperation,
)

logger = logging.getLogger(__name__)

CODE_OPEN = "<dec-code>"
CODE_CLOSE = "</dec-code>"

WRITE_PATTERN = re.compile(
    r'<dec-write\s+file_path="(?P<file_path>[^"]+)">(?P<content>.*?)</dec-write>',
    re.DOTALL,
)
DELETE_PATTERN = re.compile(r'<dec-delete\s+file_path="(?P<file_path>[^"]+)"\s*/>')
RENAME_PATTERN = re.compile(
    r'<dec-rename\s+original_file_path="(?P<original>[^"]+)"\s+new_file_path="(?P<new>[^"]+)"\s*/>'
)
# Package names never span lines
DEPENDENCY_PATTERN = re.compile(r"<dec-add-dependency>(?P<package>.*?)</dec-add-dependency>")

SUMMARY_START = re.compile(r"^(These changes|This|The)", re.IGNORECASE)

CODE_BLOCK_PATTERN = re.compile(r"<dec-code>.*?</dec-code>", re.DOTALL)
ANY_TAG_PATTERN = re.compile(r"</?dec-[^>]+>")


def _split_code_block(text: str) -> Optional[Tuple[str, str]]:
    """Return (code_block, remainder) or None when there is no complete block."""
    start = text.find(CODE_OPEN)
    if start == -1:
        return None
    end = text.find(CODE_CLOSE, start + len(CODE_OPEN))
    if end == -1:
        return None

    code_block = text[start + len(CODE_OPEN):end].strip()
    before = text[:start].strip()
    after = text[end + len(CODE_CLOSE):].strip()
    return code_block, before + "\n" + after


def parse_write_operations(code_block: str) -> List[WriteOperation]:
    operations = []
    for match in WRITE_PATTERN.finditer(code_block):
        file_path = match.group("file_path").strip()
        if not file_path:
            continue
        operations.append(WriteOperation(file_path=file_path, content=match.group("content").strip()))
    return operations


def parse_delete_operations(code_block: str) -> List[DeleteOperation]:
    operations = []
    for match in DELETE_PATTERN.finditer(code_block):
        file_path = match.group("file_path").strip()
        if file_path:
            operations.append(DeleteOperation(file_path=file_path))
    return operations


def parse_rename_operations(code_block: str) -> List[RenameOperation]:
    operations = []
    for match in RENAME_PATTERN.finditer(code_block):
        original = match.group("original").strip()
        new = match.group("new").strip()
        if original and new:
            operations.append(RenameOperation(original_path=original, new_path=new))
    return operations


def parse_dependency_operations(code_block: str) -> List[AddDependencyOperation]:
    operations = []
    for match in DEPENDENCY_PATTERN.finditer(code_block):
        package = match.group("package").strip()
        if package:
            operations.append(AddDependencyOperation(package_name=package))
    return operations


def _split_explanation(remainder: str) -> Tuple[str, str]:
    """
    Split the prose around the command block into explanation and summary.

    The first line starting with "These changes", "This" or "The" switches to
    summary mode, and every following line stays in the summary.
    """
    explanation_lines = []
    summary_lines = []
    in_summary = False

    for line in remainder.split("\n"):
        if not line.strip():
            continue
        if in_summary or SUMMARY_START.match(line):
            in_summary = True
            summary_lines.append(line)
        else:
            explanation_lines.append(line)

    return "\n".join(explanation_lines).strip(), "\n".join(summary_lines).strip()


def parse_response(response_text: str) -> ParsedResponse:
    """
    Parse an LLM response into explanation, summary and file operations.

    Operations are grouped by kind (writes, deletes, renames, dependencies),
    each group in document order. Downstream appliers rely on that order.
    """
    extracted = _split_code_block(response_text)
    if extracted is None:
        logger.debug("No command block found, treating response as plain text")
        return ParsedResponse(explanation=response_text.strip())

    code_block, remainder = extracted
    explanation, summary = _split_explanation(remainder)

    operations: List[FileOperation] = [
        *parse_write_operations(code_block),
        *parse_delete_operations(code_block),
        *parse_rename_operations(code_block),
        *parse_dependency_operations(code_block),
    ]

    if not operations:
        logger.warning(
            "Command block found but no operations parsed (block length %d): %r",
            len(code_block), code_block[:200],
        )
    else:
        logger.debug("Parsed %d operations", len(operations))

    return ParsedResponse(
        explanation=explanation,
        summary=summary,
        code_block=code_block,
        operations=tuple(operations),
    )


def has_code_operations(response_text: str) -> bool:
    """True when both command block markers appear, parsed or not."""
    return CODE_OPEN in response_text and CODE_CLOSE in response_text


def extract_text_content(response_text: str) -> str:
    """Drop command blocks entirely, then strip any remaining dec- tags but keep their text."""
    text = CODE_BLOCK_PATTERN.sub("", response_text)
    text = ANY_TAG_PATTERN.sub("", text)
    return text.strip()


def extract_clean_messages(response_text: str) -> List[str]:
    """
    Chat messages worth showing for a response: the prose before the command
    block and the prose after it. An unterminated block hides everything
    after its opening marker.
    """
    start = response_text.find(CODE_OPEN)
    if start == -1:
        text = response_text.strip()
        return [text] if text else []

    messages = []
    before = response_text[:start].strip()
    if before:
        messages.append(before)

    end = response_text.find(CODE_CLOSE, start + len(CODE_OPEN))
    if end != -1:
        after = response_text[end + len(CODE_CLOSE):].strip()
        if after:
            messages.append(after)
    return messages

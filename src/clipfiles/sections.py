"""
Splitting of large clipboard payloads into paste-sized sections.
"""

from __future__ import annotations

from typing import Iterator, List

SECTION_SIZE = 20_000

CHAT_PREAMBLE = (
    "I have a lot of files to show you, I'm going to send you each section separately.\n"
    "Tell me when you're ready for the first file.\n"
    "Then continue to ask for the next file until we have completed all copying.\n"
    "\n"
)


def split_into_sections(text: str, max_length: int) -> List[str]:
    """
    Split *text* into sections of at most *max_length* characters.

    Cuts only happen at newlines, so a single line longer than *max_length*
    becomes a section of its own. ``"\\n".join(sections)`` always gives back
    *text*. Empty input yields one empty section.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if len(text) <= max_length:
        return [text]

    sections: List[str] = []
    current: List[str] = []
    current_len = 0
    for line in text.split("\n"):
        if current and current_len + 1 + len(line) > max_length:
            sections.append("\n".join(current))
            current = []
            current_len = 0
        current_len += len(line) + (1 if current else 0)
        current.append(line)
    sections.append("\n".join(current))
    return sections


class SectionFeed:
    """Hands out sections one at a time; the first one carries *preamble*."""

    def __init__(
        self,
        text: str,
        max_length: int = SECTION_SIZE,
        preamble: str = CHAT_PREAMBLE,
    ) -> None:
        self.max_length = max_length
        self.preamble = preamble
        self._sections = split_into_sections(text, max_length)

    def __len__(self) -> int:
        return len(self._sections)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._sections):
            raise IndexError(f"section {index} out of range (0..{len(self) - 1})")
        section = self._sections[index]
        return self.preamble + section if index == 0 else section

    def __iter__(self) -> Iterator[str]:
        for i in range(len(self)):
            yield self[i]

"""Prompt text used to ask for a bookmark name."""

from dataclasses import dataclass

from bookmark_namer.naming.domain.schemas import STRICT_MAX_WORDS, STRICT_MIN_WORDS
from bookmark_namer.naming.domain.value_objects import NameStrictness

DEFAULT_MIN_WORDS = 2
DEFAULT_MAX_WORDS = 4

DEFAULT_PREAMBLE = """You name version-control branches. \
Summarize *all* of the commit messages below in a single short phrase \
that will become the branch name.

Rules for a good branch name:
- Use between {min_words} and {max_words} words.
- Use only lowercase letters.
- Derive the name from a summary of all of the messages, not from a single one.
- Describe what the majority of the commits do.
- Do not mention branches.
- Do not use low-information names such as "update", "changes", "misc fixes" or "wip".
- Do not use a date or a version number as the name."""

DEFAULT_POSTAMBLE = """Reply with only the branch name. \
Do not add an explanation, quotes, punctuation or more words."""


@dataclass(frozen=True)
class PromptConfig:
    """Prompt text wrapped around the commit messages.

    The preamble may reference ``{min_words}`` and ``{max_words}``.
    """

    preamble: str = DEFAULT_PREAMBLE
    postamble: str = DEFAULT_POSTAMBLE
    min_words: int = DEFAULT_MIN_WORDS
    max_words: int = DEFAULT_MAX_WORDS

    def __post_init__(self) -> None:
        if self.min_words < 1 or self.max_words < self.min_words:
            raise ValueError(
                f"Invalid word bounds: min_words={self.min_words}, max_words={self.max_words}"
            )


def default_prompt_config(strictness: NameStrictness) -> PromptConfig:
    """Default prompt whose word bounds agree with the strictness level."""
    if strictness is NameStrictness.STRICT:
        return PromptConfig(min_words=STRICT_MIN_WORDS, max_words=STRICT_MAX_WORDS)
    return PromptConfig()

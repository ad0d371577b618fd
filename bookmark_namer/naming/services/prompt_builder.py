"""Builds the prompt asking for a bookmark name."""

from bookmark_namer.naming.domain.prompt_config import PromptConfig
from bookmark_namer.vcs.domain.value_objects import CommitLog


class PromptBuilder:
    """Wraps commit messages in the naming rules and the output instruction."""

    def __init__(self, config: PromptConfig | None = None) -> None:
        self._config = config or PromptConfig()

    def build(self, commit_log: CommitLog) -> str:
        """
        Build the prompt for a commit log.

        The prompt is always laid out as rules, then the fenced commit
        messages, then the instruction to reply with only the name.

        Args:
            commit_log: Rendered commit messages

        Returns:
            Prompt text
        """
        config = self._config
        preamble = config.preamble.format(min_words=config.min_words, max_words=config.max_words)
        commits = commit_log.text.strip("\n")
        return f"{preamble}\n\n```\n{commits}\n```\n\n{config.postamble}"
